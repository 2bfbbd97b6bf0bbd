"""
Grouping and reduction helpers shared by the aggregation functions.

Every helper makes a single pass over its input, never mutates it, and keeps
first-occurrence order: grouped mappings are ordered by the first time a key
was seen, and ties in min/max go to the earliest item.
"""

from typing import Any, Callable, Dict, Hashable, Iterable, List, Optional, Sequence, Tuple, TypeVar

from empstats.exceptions import EmptyInputError

T = TypeVar("T")

KeyFunc = Callable[[Any], Any]
Normalizer = Optional[Callable[[Any], Hashable]]


def _normalize_key(value: Any) -> Hashable:
    """Casefold strings so that 'Sales' and 'sales' share a bucket."""
    if isinstance(value, str):
        return value.casefold()
    return value


def group_by(
    items: Iterable[T], key: KeyFunc, normalize: Normalizer = _normalize_key
) -> Dict[Any, List[T]]:
    """
    Group items by key.

    Args:
        items: Items to group
        key: Function returning the grouping key of an item
        normalize: Function mapping a key to the value compared for equality,
            or None to compare keys as-is

    Returns:
        Dictionary mapping each key (spelled as first seen) to its items, in
        first-occurrence order
    """
    labels: Dict[Hashable, Any] = {}
    grouped: Dict[Any, List[T]] = {}
    for item in items:
        raw = key(item)
        marker = normalize(raw) if normalize else raw
        if marker not in labels:
            labels[marker] = raw
            grouped[raw] = []
        grouped[labels[marker]].append(item)
    return grouped


def count_by(items: Iterable[T], key: KeyFunc, normalize: Normalizer = _normalize_key) -> Dict[Any, int]:
    """Count items per key."""
    return {label: len(group) for label, group in group_by(items, key, normalize).items()}


def sum_by(
    items: Iterable[T], key: KeyFunc, value: KeyFunc, normalize: Normalizer = _normalize_key
) -> Dict[Any, Any]:
    """Sum value(item) per key."""
    return {
        label: sum(value(item) for item in group)
        for label, group in group_by(items, key, normalize).items()
    }


def average_by(
    items: Iterable[T],
    key: KeyFunc,
    value: KeyFunc,
    ndigits: Optional[int] = 2,
    normalize: Normalizer = _normalize_key,
) -> Dict[Any, float]:
    """
    Average value(item) per key.

    Groups are never empty, so there is no division by zero. Results are
    rounded with round() to ndigits places (half-even on the binary value);
    pass ndigits=None to keep the raw quotient.
    """
    averages: Dict[Any, float] = {}
    for label, group in group_by(items, key, normalize).items():
        average = sum(value(item) for item in group) / len(group)
        averages[label] = round(average, ndigits) if ndigits is not None else average
    return averages


def map_by(
    items: Iterable[T], key: KeyFunc, value: KeyFunc, normalize: Normalizer = _normalize_key
) -> Dict[Any, List[Any]]:
    """Collect value(item) per key, keeping input order inside each group."""
    return {
        label: [value(item) for item in group]
        for label, group in group_by(items, key, normalize).items()
    }


def distinct(values: Iterable[Any], normalize: Normalizer = _normalize_key) -> List[Any]:
    """Return values without duplicates, keeping the first spelling of each."""
    seen = set()
    result = []
    for raw in values:
        marker = normalize(raw) if normalize else raw
        if marker not in seen:
            seen.add(marker)
            result.append(raw)
    return result


def partition(items: Iterable[T], predicate: Callable[[T], bool]) -> Tuple[List[T], List[T]]:
    """
    Split items into those matching the predicate and the rest.

    Returns:
        Tuple of (matching, rest), each in input order
    """
    matching: List[T] = []
    rest: List[T] = []
    for item in items:
        if predicate(item):
            matching.append(item)
        else:
            rest.append(item)
    return matching, rest


def first_max(items: Sequence[T], key: KeyFunc, operation: str = "max") -> T:
    """
    Return the item with the greatest key; the earliest one wins a tie.

    Raises:
        EmptyInputError: If items is empty
    """
    if not items:
        raise EmptyInputError(operation)
    # max() keeps the first maximal element
    return max(items, key=key)


def first_min(items: Sequence[T], key: KeyFunc, operation: str = "min") -> T:
    """
    Return the item with the smallest key; the earliest one wins a tie.

    Raises:
        EmptyInputError: If items is empty
    """
    if not items:
        raise EmptyInputError(operation)
    return min(items, key=key)
