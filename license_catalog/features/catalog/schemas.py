from __future__ import annotations

import logging
from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, model_validator

logger = logging.getLogger(__name__)


def as_record_id(value: Any) -> Any:
    """Numeric ids are keyed by their string form."""

    if isinstance(value, int) and not isinstance(value, bool):
        return str(value)
    return value


RecordId = Annotated[str, BeforeValidator(as_record_id)]


class _Record(BaseModel):
    # Datasets are normalized upstream; anything we do not render is ignored.
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    @model_validator(mode="before")
    @classmethod
    def _drop_nulls(cls, value: Any) -> Any:
        # `null` means absent; fall back to the field default.
        if isinstance(value, dict):
            return {k: v for k, v in value.items() if v is not None}
        return value


class LocalizedString(_Record):
    language: str = ""
    text: str = ""


LocalizedText = list[LocalizedString]


class Ref(_Record):
    ref: RecordId | None = None


class ActionRecord(_Record):
    id: RecordId | None = None
    name: LocalizedText = Field(default_factory=list)
    description: LocalizedText = Field(default_factory=list)


class ConditionRecord(_Record):
    id: RecordId | None = None
    condition_type: str = Field(default="", alias="conditionType")
    name: LocalizedText = Field(default_factory=list)
    description: LocalizedText = Field(default_factory=list)


class NoticeRecord(_Record):
    id: RecordId | None = None
    description: LocalizedText = Field(default_factory=list)
    content: LocalizedText = Field(default_factory=list)


class PermissionRecord(_Record):
    summary: LocalizedText = Field(default_factory=list)
    description: LocalizedText = Field(default_factory=list)
    actions: list[Ref] = Field(default_factory=list)
    # Kept as raw JSON: trees may nest deeper than model validation allows.
    condition_head: dict[str, Any] | None = Field(default=None, alias="conditionHead")


class LicenseRecord(_Record):
    name: str = ""
    spdx: str = ""
    summary: LocalizedText = Field(default_factory=list)
    description: LocalizedText = Field(default_factory=list)
    content: str = ""
    permissions: list[PermissionRecord] = Field(default_factory=list)
    notices: list[Ref] = Field(default_factory=list)


class Envelope(_Record):
    """One item of a dataset array: `{"data": {...}}`."""

    data: dict | None = None


def parse_items(items: list, model: type[_Record]) -> list[_Record]:
    """Unwrap `{"data": ...}` envelopes and validate each record.

    Items without a `data` object are skipped.
    """

    records: list[_Record] = []
    for item in items:
        env = Envelope.model_validate(item)
        if env.data is None:
            logger.debug("Skipping %s item without a data object", model.__name__)
            continue
        records.append(model.model_validate(env.data))
    return records
