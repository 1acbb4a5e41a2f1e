"""
Small helpers shared by readers and the transformer.
"""

from itertools import combinations
from typing import List, Optional, Sequence, TypeVar

T = TypeVar('T')


def string_to_bool(value: Optional[str]) -> bool:
    """Return True if ``value`` equals "true" (case insensitive, trimmed), False otherwise."""
    return bool(value) and value.strip().upper() == "TRUE"


def string_to_optional_bool(value: Optional[str]) -> Optional[bool]:
    """
    Convert a boolean string to a tri-state value.

    Returns None for a missing or empty string, True for "true" (case
    insensitive) and False for anything else.
    """
    if not value:
        return None
    return value.strip().upper() == "TRUE"


def get_all_combinations(items: Sequence[T], min_length: int = 1) -> List[List[T]]:
    """
    Get all combinations of the items provided.

    Combinations are ordered by size, then by the position of their members
    in ``items``. The full sequence is always the last combination, even when
    ``min_length`` exceeds its length.

    Args:
        items: Items to combine.
        min_length: Minimal size of the combinations. Defaults to 1.

    Returns:
        List of combinations, each a list preserving the order of ``items``.
    """
    result: List[List[T]] = []
    for size in range(min_length, len(items)):
        result.extend(list(combo) for combo in combinations(items, size))
    result.append(list(items))
    return result
