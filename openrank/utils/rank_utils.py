"""helpers for ordering teams by rank and rescaling player weights"""
from typing import List, Sequence, Tuple, TypeVar
from openrank.utils.constants import ZERO_RANGE_SUBSTITUTE

T = TypeVar('T')


def unwind(tenet: Sequence, items: Sequence[T]) -> Tuple[List[T], List[int]]:
    """
    Stably sort items by their tenet and remember where each one came from.

    Parameters:
        tenet (Sequence): sort keys, one per item. Ties keep their original relative order.
        items (Sequence): the items to reorder.

    Returns:
        (sorted_items, original_indices) where original_indices[k] is the position the item
        now at k had before sorting. Passing original_indices back in as the tenet undoes the sort.
    """
    if len(items) == 0:
        return [], []
    order = sorted(range(len(items)), key=lambda idx: (tenet[idx], idx))
    return [items[idx] for idx in order], order


def ladder_pairs(items: Sequence[T]) -> List[List[T]]:
    """the rank adjacent neighbours of every item, the ends only have one"""
    n = len(items)
    if n <= 1:
        return [[]]
    pairs = [[items[1]]]
    for idx in range(1, n - 1):
        pairs.append([items[idx - 1], items[idx + 1]])
    pairs.append([items[n - 2]])
    return pairs


def normalize(vector: Sequence[float], target_min: float, target_max: float) -> List[float]:
    """linearly rescale vector so that its min maps to target_min and its max to target_max"""
    if len(vector) == 0:
        return []
    if len(vector) == 1:
        return [float(target_max)]

    source_min = min(vector)
    source_max = max(vector)
    source_range = source_max - source_min
    if source_range == 0:
        source_range = ZERO_RANGE_SUBSTITUTE

    target_range = target_max - target_min
    return [((value - source_min) / source_range) * target_range + target_min for value in vector]
