"""Ordering of scene names for presentation."""

from __future__ import annotations

from itertools import groupby
from typing import Iterable


def _ascii_lower(text: str) -> str:
    return "".join(ch.lower() if ch.isascii() else ch for ch in text)


def sort_and_dedup_scenes(scenes: Iterable[str]) -> list[str]:
    """Sort scene names ignoring ASCII case, then drop adjacent exact duplicates.

    The sort is stable, so names that differ only in case keep their
    original relative order. Only identical neighbours are merged.
    """
    ordered = sorted(scenes, key=_ascii_lower)
    return [name for name, _ in groupby(ordered)]