#!/usr/bin/env python3
"""
Model Store
===========
Persists transition tables and length indexes as JSON files.

JSON has no map with non-string keys and no set type, so both are written
as tagged objects:

    {"dataType": "Map", "value": [[key, value], ...]}
    {"dataType": "Set", "value": [item, ...]}

Lists stay plain JSON arrays. Decoding reverses the tags, so integer
length keys and word sets come back with their original types.

Usage:
    store = ModelStore("models")
    store.save("trigramModel", model)
    model = store.load("trigramModel")
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)

MAP_TAG = 'Map'
SET_TAG = 'Set'


def encode(value: Any) -> Any:
    """Convert dicts and sets into tagged JSON-compatible structures."""
    if isinstance(value, dict):
        return {
            'dataType': MAP_TAG,
            'value': [[encode(k), encode(v)] for k, v in value.items()],
        }
    if isinstance(value, (set, frozenset)):
        # Sorted so the same set always serializes the same way
        return {
            'dataType': SET_TAG,
            'value': [encode(item) for item in sorted(value, key=str)],
        }
    if isinstance(value, (list, tuple)):
        return [encode(item) for item in value]
    return value


def _revive(obj: dict) -> Any:
    tag = obj.get('dataType')
    value = obj.get('value')
    if tag == MAP_TAG and isinstance(value, list):
        return {k: v for k, v in value}
    if tag == SET_TAG and isinstance(value, list):
        return set(value)
    return obj


def dumps(value: Any) -> str:
    return json.dumps(encode(value))


def loads(text: str) -> Any:
    return json.loads(text, object_hook=_revive)


class ModelStore:
    """Directory of named JSON artifacts"""

    SUFFIX = '.json'

    def __init__(self, directory: Path | str):
        self.directory = Path(directory)

    def path(self, name: str) -> Path:
        if not name:
            raise ValueError("artifact name cannot be empty")
        return self.directory / f"{name}{self.SUFFIX}"

    def exists(self, name: str) -> bool:
        return self.path(name).exists()

    def save(self, name: str, value: Any) -> Path:
        """Write an artifact, creating the store directory if needed."""
        path = self.path(name)
        self.directory.mkdir(parents=True, exist_ok=True)
        path.write_text(dumps(value))
        logger.info(f"Saved {path.name}")
        return path

    def load(self, name: str) -> Any:
        """
        Read an artifact.

        Raises:
            FileNotFoundError: If the artifact was never built
        """
        path = self.path(name)
        if not path.exists():
            raise FileNotFoundError(f"Model artifact not found: {path}")
        logger.debug(f"Loading {path}")
        return loads(path.read_text())
