import os
from dataclasses import dataclass
from pathlib import Path

from license_catalog.infra.providers import DataProvider, FileDataProvider, HttpDataProvider


@dataclass(frozen=True)
class AppConfig:
    data_dir: Path
    data_url: str | None = None
    language: str = "ja"

    def provider(self) -> DataProvider:
        if self.data_url:
            return HttpDataProvider(self.data_url)
        return FileDataProvider(self.data_dir)


def load_config() -> AppConfig:
    return AppConfig(
        data_dir=Path(os.environ.get("LICENSE_CATALOG_DATA_DIR", "data")),
        data_url=os.environ.get("LICENSE_CATALOG_DATA_URL") or None,
        language=os.environ.get("LICENSE_CATALOG_LANGUAGE", "ja"),
    )
