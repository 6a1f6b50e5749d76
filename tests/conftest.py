"""
Pytest Configuration and Fixtures.

This file configures pytest and provides shared fixtures for all tests.
"""
import json
import random
import sys
from datetime import date
from pathlib import Path

import pytest

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from src.core.models import StudyItem, UserProgress  # noqa: E402


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line("markers", "unit: Unit tests")
    config.addinivalue_line("markers", "smoke: Smoke tests for CLI commands")


def pytest_collection_modifyitems(config, items):
    """Automatically mark tests based on their location."""
    for item in items:
        if "unit" in str(item.fspath):
            item.add_marker(pytest.mark.unit)
        elif "smoke" in str(item.fspath):
            item.add_marker(pytest.mark.smoke)


def make_item(item_id: str, term: str, category: str, **fields) -> StudyItem:
    """Build a StudyItem with a usable description unless one is given."""
    fields.setdefault("definition", f"{term} definition")
    fields.setdefault("what_it_is", f"a thing called {term}")
    return StudyItem(id=item_id, term=term, category=category, **fields)


@pytest.fixture(scope="session")
def project_root():
    """Return the project root directory."""
    return PROJECT_ROOT


@pytest.fixture
def sample_items():
    """
    A small corpus spanning three modules.

    - python-fundamentals: 7 "Python Concepts" + 2 "Python Libraries" (3 lessons)
    - networking-http: 3 "Networking" items (1 lesson, too small to quiz)
    - more-topics: 2 items in a category no module claims
    """
    items = [
        make_item(f"py-{n}", f"Python term {n}", "Python Concepts", kind="concept", project="alpha")
        for n in range(1, 8)
    ]
    items += [
        make_item("lib-1", "requests", "Python Libraries", kind="library", project="alpha, beta"),
        make_item("lib-2", "pydantic", "Python Libraries", kind="library", project="beta"),
    ]
    items += [
        make_item("net-1", "TCP", "Networking", kind="concept", project="gamma"),
        make_item("net-2", "curl", "Networking", kind="tool", project="gamma"),
        make_item("net-3", "DNS", "Networking", kind="service", project="gamma"),
    ]
    items += [
        make_item("misc-1", "Widget", "Mystery Category", kind="pattern"),
        make_item("misc-2", "Gadget", "Mystery Category", kind="pattern"),
    ]
    return items


@pytest.fixture
def corpus_file(tmp_path, sample_items):
    """The sample corpus written as a camelCase JSON array."""
    path = tmp_path / "study_items.json"
    records = [item.model_dump(mode="json", by_alias=True) for item in sample_items]
    path.write_text(json.dumps(records), encoding="utf-8")
    return path


@pytest.fixture
def rng():
    """Seeded random source for deterministic shuffles."""
    return random.Random(1234)


@pytest.fixture
def today():
    """Fixed study date."""
    return date(2024, 3, 10)


@pytest.fixture
def fresh_progress():
    """Default progress snapshot."""
    return UserProgress()


@pytest.fixture
def item_factory():
    """Access to make_item from test modules."""
    return make_item
