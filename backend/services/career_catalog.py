"""Static career catalog: loaded once, read-only for the process lifetime.

Follows the lazy singleton pattern used for the other process-wide services:
``get_catalog()`` builds the catalog on first use, ``clear()`` drops it so
tests can swap in a different data file.
"""

import json
import logging
from pathlib import Path
from types import MappingProxyType
from typing import Mapping

from pydantic import TypeAdapter, ValidationError

from config import settings
from models.schemas.career import CareerDefinition
from services.catalog_data import CAREER_PATHS

logger = logging.getLogger(__name__)

_RAW_ADAPTER = TypeAdapter(dict[str, list[CareerDefinition]])


class CatalogError(ValueError):
    """Raised when catalog data cannot be loaded or is inconsistent."""


class CareerCatalog:
    """Immutable category -> careers table.

    Category identity only organizes storage; matching works on the
    flattened sequence returned by ``all_careers()``.
    """

    def __init__(self, categories: Mapping[str, tuple[CareerDefinition, ...]]) -> None:
        seen: set[str] = set()
        for careers in categories.values():
            for career in careers:
                key = career.title.lower()
                if key in seen:
                    raise CatalogError(f"Duplicate career title in catalog: {career.title}")
                seen.add(key)

        self._categories = MappingProxyType({name: tuple(c) for name, c in categories.items()})
        self._careers = tuple(c for careers in self._categories.values() for c in careers)
        self._by_title = {c.title.lower(): c for c in self._careers}

    def __len__(self) -> int:
        return len(self._careers)

    @property
    def category_names(self) -> list[str]:
        return list(self._categories)

    def all_careers(self) -> tuple[CareerDefinition, ...]:
        """All careers, category order then entry order."""
        return self._careers

    def list_categories(self) -> Mapping[str, tuple[CareerDefinition, ...]]:
        return self._categories

    def find(self, title: str) -> CareerDefinition | None:
        """Case-insensitive exact title lookup."""
        return self._by_title.get(title.lower())


def build_catalog(raw: Mapping[str, list]) -> CareerCatalog:
    """Validate raw ``{category: [career, ...]}`` data into a catalog."""
    try:
        parsed = _RAW_ADAPTER.validate_python(dict(raw))
    except ValidationError as e:
        raise CatalogError(f"Invalid career catalog data: {e}") from e
    return CareerCatalog({name: tuple(careers) for name, careers in parsed.items()})


def load_catalog(path: str | Path | None = None) -> CareerCatalog:
    """Load the catalog from a JSON file, or the built-in data when no path is given."""
    if not path:
        catalog = build_catalog(CAREER_PATHS)
        logger.info("Loaded built-in career catalog (%d careers)", len(catalog))
        return catalog

    path = Path(path)
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        raise CatalogError(f"Could not read career catalog {path}: {e}") from e
    if not isinstance(raw, dict):
        raise CatalogError(f"Career catalog {path} must be a JSON object of categories")

    catalog = build_catalog(raw)
    logger.info("Loaded career catalog from %s (%d careers)", path, len(catalog))
    return catalog


_catalog: CareerCatalog | None = None


def get_catalog() -> CareerCatalog:
    global _catalog
    if _catalog is None:
        _catalog = load_catalog(settings.career_catalog_path or None)
    return _catalog


def clear() -> None:
    """Drop the cached catalog. Useful for testing."""
    global _catalog
    _catalog = None
