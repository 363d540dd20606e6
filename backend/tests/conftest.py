"""Shared test configuration and fixtures."""

import pytest

from services import career_catalog
from services.career_catalog import CareerCatalog, load_catalog


@pytest.fixture
def catalog() -> CareerCatalog:
    """A freshly loaded built-in catalog."""
    return load_catalog()


@pytest.fixture
def reset_catalog_cache():
    career_catalog.clear()
    yield
    career_catalog.clear()
