import asyncio
import logging
from typing import Any

from pydantic import ValidationError

from license_catalog.domain.enums import Dataset
from license_catalog.features.catalog.cards import CatalogIndices, compose_card
from license_catalog.features.catalog.errors import CatalogLoadError
from license_catalog.features.catalog.localize import DEFAULT_LANGUAGE
from license_catalog.features.catalog.models import LicenseCard
from license_catalog.features.catalog.reference_index import build_index
from license_catalog.features.catalog.schemas import (
    ActionRecord,
    ConditionRecord,
    LicenseRecord,
    NoticeRecord,
    parse_items,
)
from license_catalog.infra.providers import DataProvider, DatasetUnavailableError

logger = logging.getLogger(__name__)

_RECORD_MODELS = {
    Dataset.licenses: LicenseRecord,
    Dataset.actions: ActionRecord,
    Dataset.conditions: ConditionRecord,
    Dataset.notices: NoticeRecord,
}


def _parse(dataset: Dataset, items: list[Any]) -> list:
    try:
        return parse_items(items, _RECORD_MODELS[dataset])
    except ValidationError as e:
        raise CatalogLoadError(dataset, f"invalid records: {e.error_count()} error(s)") from e


def build_catalog(
    licenses: list[Any],
    actions: list[Any],
    conditions: list[Any],
    notices: list[Any],
    *,
    language: str = DEFAULT_LANGUAGE,
) -> list[LicenseCard]:
    """Turn four raw dataset arrays into one card per license, in input order."""

    indices = CatalogIndices(
        actions=build_index(_parse(Dataset.actions, actions)),
        conditions=build_index(_parse(Dataset.conditions, conditions)),
        notices=build_index(_parse(Dataset.notices, notices)),
    )
    return [compose_card(lic, indices, language=language) for lic in _parse(Dataset.licenses, licenses)]


async def _fetch(provider: DataProvider, dataset: Dataset) -> list[Any]:
    try:
        return await asyncio.to_thread(provider.fetch, dataset)
    except DatasetUnavailableError as e:
        raise CatalogLoadError(dataset, e.reason) from e


async def load_catalog(provider: DataProvider, *, language: str = DEFAULT_LANGUAGE) -> list[LicenseCard]:
    """Fetch all four datasets concurrently, then build the cards.

    All-or-nothing: the first failed dataset aborts the build with a single
    `CatalogLoadError`.
    """

    try:
        licenses, actions, conditions, notices = await asyncio.gather(
            _fetch(provider, Dataset.licenses),
            _fetch(provider, Dataset.actions),
            _fetch(provider, Dataset.conditions),
            _fetch(provider, Dataset.notices),
        )
        cards = build_catalog(licenses, actions, conditions, notices, language=language)
    except CatalogLoadError as e:
        logger.warning("Catalog load failed for %s: %s", e.dataset.value, e.reason)
        raise

    logger.info(
        "Catalog loaded: %d licenses, %d actions, %d conditions, %d notices",
        len(licenses),
        len(actions),
        len(conditions),
        len(notices),
    )
    return cards


class CatalogService:
    def __init__(self, *, provider: DataProvider, language: str = DEFAULT_LANGUAGE) -> None:
        self._provider = provider
        self._language = language

    async def list_cards(self, *, language: str | None = None) -> list[LicenseCard]:
        return await load_catalog(self._provider, language=language or self._language)

    async def get_card(self, *, spdx: str, language: str | None = None) -> LicenseCard | None:
        cards = await self.list_cards(language=language)
        return next((c for c in cards if c.spdx == spdx), None)
