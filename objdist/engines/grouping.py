"""
Label grouping for object collections.

Objects sharing a label belong to the same class. These helpers summarize
a collection by label without changing it.
"""

from typing import Any, Dict, List, Sequence, Union

from objdist.core.types import ObjectRecord


def max_label(objects: Sequence[ObjectRecord]) -> int:
    """Highest label in the collection, or 0 when there is none above 0."""
    highest = 0
    for obj in objects:
        if obj.label > highest:
            highest = obj.label
    return highest


def group_by_label(
    objects: Sequence[ObjectRecord],
    *,
    as_dict: bool = False,
) -> Union[List[List[ObjectRecord]], Dict[int, List[ObjectRecord]]]:
    """
    Group objects by label, keeping enumeration order inside each group.

    Args:
        objects: Object collection
        as_dict: Return {label: [objects]} instead of a list indexed by label

    Returns:
        List of length max_label + 1 (empty groups included), or a dict.
        Negative labels only fit the dict form.
    """
    if as_dict:
        groups: Dict[int, List[ObjectRecord]] = {}
        for obj in objects:
            groups.setdefault(obj.label, []).append(obj)
        return groups

    if any(obj.label < 0 for obj in objects):
        raise ValueError("Negative labels cannot be indexed; use as_dict=True")

    indexed: List[List[ObjectRecord]] = [[] for _ in range(max_label(objects) + 1)]
    for obj in objects:
        indexed[obj.label].append(obj)
    return indexed


def label_summary(objects: Sequence[ObjectRecord]) -> Dict[str, Any]:
    """Return {'max_label': int, 'labels': {label: count}}."""
    return {
        'max_label': max_label(objects),
        'labels': {label: len(group) for label, group in group_by_label(objects, as_dict=True).items()},
    }
