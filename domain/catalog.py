"""
Built-in exercise library and catalog merge helpers.
"""

import pathlib
from functools import lru_cache
from typing import Iterable, List, Tuple

import yaml

from domain.models import CatalogExercise

DATA_FILE = pathlib.Path(__file__).resolve().parent / "data" / "default_exercises.yaml"


@lru_cache
def _load_defaults() -> Tuple[CatalogExercise, ...]:
    raw = yaml.safe_load(DATA_FILE.read_text(encoding="utf-8")) or []
    return tuple(CatalogExercise.model_validate(item) for item in raw)


def default_exercises() -> List[CatalogExercise]:
    """Fresh copies of the built-in library, in display order."""
    return [entry.model_copy() for entry in _load_defaults()]


def is_default(name: str) -> bool:
    key = name.strip().lower()
    return any(entry.key == key for entry in _load_defaults())


def find(catalog: Iterable[CatalogExercise], name: str):
    """Case-insensitive lookup by name. Returns None when absent."""
    key = name.strip().lower()
    return next((entry for entry in catalog if entry.key == key), None)


def merge(base: Iterable[CatalogExercise], extra: Iterable[CatalogExercise]) -> List[CatalogExercise]:
    """
    Append entries from ``extra`` whose name is not already in ``base``.

    Order is preserved: base entries first, then new extras in their order.
    """
    merged = list(base)
    seen = {entry.key for entry in merged}
    for entry in extra:
        if entry.key not in seen:
            merged.append(entry)
            seen.add(entry.key)
    return merged


def custom_entries(catalog: Iterable[CatalogExercise]) -> List[CatalogExercise]:
    """Entries that are not part of the built-in library."""
    return [entry for entry in catalog if not is_default(entry.name)]


def muscle_groups(catalog: Iterable[CatalogExercise]) -> List[str]:
    groups: List[str] = []
    for entry in catalog:
        if entry.muscle_group not in groups:
            groups.append(entry.muscle_group)
    return groups
