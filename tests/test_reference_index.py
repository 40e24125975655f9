import pytest

from license_catalog.features.catalog.reference_index import build_index
from license_catalog.features.catalog.schemas import ActionRecord, LocalizedString


def _action(action_id: str | None, name: str) -> ActionRecord:
    return ActionRecord(id=action_id, name=[LocalizedString(language="en", text=name)])


def test_last_duplicate_wins() -> None:
    idx = build_index([_action("use", "first"), _action("modify", "m"), _action("use", "second")])
    assert len(idx) == 2
    assert idx["use"].name[0].text == "second"


def test_missing_id_returns_none() -> None:
    idx = build_index([_action("use", "Use")])
    assert idx.get("nope") is None
    assert "nope" not in idx


def test_records_without_id_are_not_indexed() -> None:
    idx = build_index([_action(None, "orphan"), _action("use", "Use")])
    assert list(idx) == ["use"]


def test_index_is_read_only() -> None:
    idx = build_index([_action("use", "Use")])
    with pytest.raises(TypeError):
        idx["use"] = _action("use", "other")  # type: ignore[index]
