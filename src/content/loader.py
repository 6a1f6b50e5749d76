"""
Corpus loader for the pre-built study item file.

The corpus is produced once by an offline extraction step and shipped as
JSON: either a bare array of items or an object with an "items" array.
"""

import json
from collections.abc import Iterable
from pathlib import Path

from loguru import logger
from pydantic import ValidationError

from src.core.exceptions import CorpusError
from src.core.models import StudyItem


def parse_items(records: Iterable[object]) -> list[StudyItem]:
    """
    Validate raw records into StudyItems, keeping their order.

    Raises:
        CorpusError: on an invalid record or a repeated id
    """
    items: list[StudyItem] = []
    seen: set[str] = set()

    for index, record in enumerate(records):
        try:
            item = StudyItem.model_validate(record)
        except ValidationError as e:
            raise CorpusError(f"Invalid study item at index {index}: {e}") from e
        if item.id in seen:
            raise CorpusError(f"Duplicate study item id at index {index}: {item.id}")
        seen.add(item.id)
        items.append(item)

    return items


def load_items(path: Path | str) -> list[StudyItem]:
    """
    Load the corpus from a JSON file.

    Args:
        path: Corpus file

    Returns:
        Items in file order

    Raises:
        CorpusError: if the file is missing, not JSON, or holds invalid items
    """
    path = Path(path)
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError as e:
        raise CorpusError(f"Corpus file not found: {path}") from e
    except (OSError, json.JSONDecodeError) as e:
        raise CorpusError(f"Could not read corpus {path}: {e}") from e

    if isinstance(data, dict):
        data = data.get("items")
    if not isinstance(data, list):
        raise CorpusError(f"Corpus {path} must be a JSON array of items")

    items = parse_items(data)
    logger.debug(f"Loaded {len(items)} study items from {path}")
    return items
