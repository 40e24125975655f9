from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any

LABEL_SEPARATOR = ": "


def join_label(head: str, tail: str) -> str:
    return f"{head}{LABEL_SEPARATOR}{tail}" if tail else head


@dataclass(frozen=True)
class RenderedCondition:
    kind: str  # LEAF/AND/OR
    depth: int
    condition_type: str | None = None
    name: str = ""
    description: str = ""
    children: tuple[RenderedCondition, ...] = ()

    @property
    def label(self) -> str:
        return join_label(self.name, self.description)

    @property
    def indent_px(self) -> int:
        return self.depth * 20


@dataclass(frozen=True)
class ActionEntry:
    name: str
    description: str

    @property
    def label(self) -> str:
        return join_label(self.name, self.description)


@dataclass(frozen=True)
class NoticeEntry:
    description: str
    content: str

    @property
    def label(self) -> str:
        return join_label(self.description, self.content)


@dataclass(frozen=True)
class PermissionSection:
    summary: str
    description: str
    actions: tuple[ActionEntry, ...]
    conditions: RenderedCondition | None


@dataclass(frozen=True)
class LicenseCard:
    name: str
    spdx: str
    summary: str
    description: str
    permissions: tuple[PermissionSection, ...]
    notices: tuple[NoticeEntry, ...]
    content: str

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)
