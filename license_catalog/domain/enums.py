from enum import Enum


class NodeType(str, Enum):
    leaf = "LEAF"
    and_ = "AND"
    or_ = "OR"


class Dataset(str, Enum):
    licenses = "licenses"
    actions = "actions"
    conditions = "conditions"
    notices = "notices"
