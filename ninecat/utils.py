"""Snapshot file loading and player name matching."""

import json
import logging
import re
from pathlib import Path
from typing import Any, Callable, Iterable, Optional, TypeVar

from pydantic import BaseModel, ValidationError

T = TypeVar('T', bound=BaseModel)
R = TypeVar('R')
logger = logging.getLogger('ninecat.utils')

# Shorter searches match half the league
MIN_NAME_LENGTH = 3


def load_json(path: Path | str, schema: type[T] | None = None) -> Any | T:
    """
    Read a JSON file, validating it against a pydantic model when one is given.

    Raises:
        FileNotFoundError: If the file doesn't exist
        json.JSONDecodeError: If the file isn't JSON
        ValueError: If the data doesn't fit the schema
    """
    path = Path(path)
    logger.debug(f'Reading {path}')
    with open(path, encoding='utf-8') as f:
        data = json.load(f)

    if schema is None:
        return data
    try:
        return schema.model_validate(data)
    except ValidationError as e:
        raise ValueError(f'Schema validation failed for {path}:\n{e}') from e


def clean_name(name: str) -> str:
    """Lowercase a player or team name and drop suffixes like Jr. or III."""
    name = re.sub(r'\s+', ' ', name.strip())
    name = re.sub(r'\s+(Sr\.?|Jr\.?|II|III|IV|V)$', '', name, flags=re.IGNORECASE)
    return name.lower()


def match_name(query: str, candidates: Iterable[R], get_name: Callable[[R], str]) -> Optional[R]:
    """
    Find the candidate whose name best matches a free-text query.

    Tries an exact match, then a substring match, then a last-name match.
    The looser steps only accept a single hit. Returns None for queries
    shorter than MIN_NAME_LENGTH, no match, or an ambiguous one.
    """
    candidates = list(candidates)
    target = clean_name(query)
    if len(target) < MIN_NAME_LENGTH:
        return None

    for candidate in candidates:
        if clean_name(get_name(candidate)) == target:
            return candidate

    matches = [c for c in candidates if target in clean_name(get_name(c))]
    if matches:
        return matches[0] if len(matches) == 1 else None

    parts = target.split()
    if len(parts) >= 2:
        matches = [c for c in candidates if parts[-1] in clean_name(get_name(c)).split()]
        if len(matches) == 1:
            return matches[0]

    return None
