import json
import logging
from pathlib import Path
from typing import Any, Protocol

import requests

from license_catalog.domain.enums import Dataset

logger = logging.getLogger(__name__)


class DatasetUnavailableError(Exception):
    """A dataset could not be fetched, returned a bad status or did not parse."""

    def __init__(self, dataset: Dataset, reason: str):
        super().__init__(f"{dataset.value}: {reason}")
        self.dataset = dataset
        self.reason = reason


class DataProvider(Protocol):
    def fetch(self, dataset: Dataset) -> list[Any]: ...


def _expect_array(dataset: Dataset, payload: Any) -> list[Any]:
    if not isinstance(payload, list):
        raise DatasetUnavailableError(dataset, f"expected a JSON array, got {type(payload).__name__}")
    return payload


class FileDataProvider:
    """Reads `<root>/<dataset>.json` from disk."""

    def __init__(self, root: Path) -> None:
        self._root = root

    def path_for(self, dataset: Dataset) -> Path:
        return self._root / f"{dataset.value}.json"

    def fetch(self, dataset: Dataset) -> list[Any]:
        path = self.path_for(dataset)
        try:
            payload = json.loads(path.read_text(encoding="utf-8"))
        except FileNotFoundError:
            raise DatasetUnavailableError(dataset, f"file not found: {path}")
        except (OSError, json.JSONDecodeError) as e:
            raise DatasetUnavailableError(dataset, str(e))
        return _expect_array(dataset, payload)


class HttpDataProvider:
    """Fetches `<base_url>/<dataset>.json` over HTTP."""

    def __init__(self, base_url: str, timeout: float = 10.0, session: requests.Session | None = None) -> None:
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        # A caller-supplied session is reused and left open; otherwise each fetch
        # opens its own and closes it after the request.
        self._session = session

    def url_for(self, dataset: Dataset) -> str:
        return f"{self._base_url}/{dataset.value}.json"

    def _get(self, url: str) -> requests.Response:
        if self._session is not None:
            return self._session.get(url, timeout=self._timeout)
        with requests.Session() as session:
            return session.get(url, timeout=self._timeout)

    def fetch(self, dataset: Dataset) -> list[Any]:
        url = self.url_for(dataset)
        logger.debug("Fetching %s", url)
        try:
            response = self._get(url)
        except requests.RequestException as e:
            raise DatasetUnavailableError(dataset, f"request failed: {e}")

        if not response.ok:
            raise DatasetUnavailableError(dataset, f"HTTP error! status: {response.status_code}")

        try:
            payload = response.json()
        except ValueError as e:
            raise DatasetUnavailableError(dataset, f"invalid JSON: {e}")
        return _expect_array(dataset, payload)
