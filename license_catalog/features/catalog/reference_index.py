from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from types import MappingProxyType
from typing import Generic, TypeVar

R = TypeVar("R")


class ReferenceIndex(Mapping[str, R], Generic[R]):
    """Read-only `id -> record` lookup for one dataset.

    Built once after load; `get` on an unknown id returns None.
    """

    def __init__(self, records: Mapping[str, R]) -> None:
        self._records = MappingProxyType(dict(records))

    def __getitem__(self, key: str) -> R:
        return self._records[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._records)

    def __len__(self) -> int:
        return len(self._records)

    def __repr__(self) -> str:
        return f"ReferenceIndex({len(self)} records)"


def build_index(records: Iterable[R]) -> ReferenceIndex[R]:
    """Index records by their `id`. Later duplicates overwrite earlier ones."""

    by_id: dict[str, R] = {}
    for r in records:
        record_id = getattr(r, "id", None)
        if record_id is None:
            continue
        by_id[record_id] = r
    return ReferenceIndex(by_id)
