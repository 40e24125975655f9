from __future__ import annotations

from license_catalog.domain.enums import Dataset


class CatalogLoadError(Exception):
    """The catalog build was aborted; no cards were produced."""

    def __init__(self, dataset: Dataset, reason: str):
        super().__init__(f"catalog_load_failed: {dataset.value}: {reason}")
        self.dataset = dataset
        self.reason = reason
