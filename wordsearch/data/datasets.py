"""Word dataset loading by category.

A dataset is a JSON array of words. Sources may be local files or
``http(s)://`` URLs; URLs are fetched with :mod:`requests`.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional

import requests

from ..core.exceptions import DatasetLoadError
from ..utils.logger import get_logger
from .normalization import clean_word


LOGGER = get_logger(__name__)

DATASETS: Dict[str, str] = {
    "animals": "data/animals.json",
    "vehicles": "data/vehicles.json",
    "foods": "data/foods.json",
    "objects": "data/objects.json",
    "countries": "data/countries.json",
}

CATEGORY_LABELS: Dict[str, str] = {
    "animals": "동물",
    "vehicles": "탈것",
    "foods": "음식",
    "objects": "사물",
    "countries": "나라",
}

DEFAULT_TIMEOUT_SECONDS = 10.0


def label_of(key: str) -> str:
    return CATEGORY_LABELS.get(key, key)


def is_url(source: str | Path) -> bool:
    return isinstance(source, str) and source.startswith(("http://", "https://"))


def _fetch_json(source: str | Path, timeout: float) -> Any:
    if is_url(source):
        try:
            response = requests.get(str(source), timeout=timeout)
            response.raise_for_status()
            return response.json()
        except requests.RequestException as exc:
            raise DatasetLoadError(f"Dataset request failed for {source}: {exc}") from exc
        except ValueError as exc:
            raise DatasetLoadError(f"Dataset at {source} is not valid JSON: {exc}") from exc

    path = Path(source)
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise DatasetLoadError(f"Cannot read dataset {path}: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise DatasetLoadError(f"Dataset {path} is not valid JSON: {exc}") from exc


def load_word_pool(source: str | Path, timeout: float = DEFAULT_TIMEOUT_SECONDS) -> List[str]:
    """Load a word pool from a JSON array of strings.

    Entries are normalized with :func:`clean_word`; entries that end up empty
    are dropped.
    """

    payload = _fetch_json(source, timeout)
    if not isinstance(payload, list):
        raise DatasetLoadError(f"Dataset {source} must be a JSON array")
    words: List[str] = []
    for entry in payload:
        if not isinstance(entry, str):
            raise DatasetLoadError(f"Dataset {source} contains a non-string entry: {entry!r}")
        cleaned = clean_word(entry)
        if cleaned:
            words.append(cleaned)
    LOGGER.info("Loaded %s words from %s", len(words), source)
    return words


@dataclass
class DatasetStat:
    category: str
    label: str
    count: Optional[int]
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.count is not None


class DatasetCatalog:
    """Resolves category names to dataset sources under a base directory or URL."""

    def __init__(
        self,
        base: str | Path = ".",
        datasets: Optional[Mapping[str, str]] = None,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
    ) -> None:
        self.base = base
        self.datasets = dict(datasets if datasets is not None else DATASETS)
        self.timeout = timeout

    def source_for(self, category: str) -> str | Path:
        try:
            relative = self.datasets[category]
        except KeyError:
            raise DatasetLoadError(f"Unknown dataset category: {category}") from None
        if is_url(self.base):
            return f"{str(self.base).rstrip('/')}/{relative}"
        return Path(self.base) / relative

    def load(self, category: str) -> List[str]:
        return load_word_pool(self.source_for(category), timeout=self.timeout)

    def stats(self) -> List[DatasetStat]:
        """Word counts per category; failures are reported, not raised."""

        stats: List[DatasetStat] = []
        for category in self.datasets:
            try:
                count: Optional[int] = len(self.load(category))
                error = None
            except DatasetLoadError as exc:
                LOGGER.warning("Dataset %s failed to load: %s", category, exc)
                count, error = None, str(exc)
            stats.append(DatasetStat(category, label_of(category), count, error))
        return stats
