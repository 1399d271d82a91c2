"""Composite ordering for task listings.

Priority is always the dominant grouping (high, then medium, then low). The
requested field only orders tasks inside a priority group, unless the
requested field is priority itself, in which case the direction applies to
the priority groups.
"""

from typing import Iterable, List, Optional, Sequence, Tuple

from tasktrack.core.errors import ValidationError
from tasktrack.models.task import Task

PRIORITIES = ("high", "medium", "low")
PRIORITY_RANK = {"high": 1, "medium": 2, "low": 3}
UNRANKED = 4

SORT_FIELDS = ("created_at", "priority", "due_date", "title")
SORT_ORDERS = ("asc", "desc")
DEFAULT_SORT_BY = "created_at"
DEFAULT_SORT_ORDER = "desc"


def priority_rank(priority: Optional[str]) -> int:
    return PRIORITY_RANK.get(priority, UNRANKED)


def validate_sort(sort_by: Optional[str] = None, sort_order: Optional[str] = None) -> Tuple[str, str]:
    """Apply defaults to missing sort params and reject unknown ones."""
    sort_by = sort_by or DEFAULT_SORT_BY
    sort_order = sort_order or DEFAULT_SORT_ORDER

    if sort_by not in SORT_FIELDS:
        raise ValidationError("Invalid sort_by parameter")
    if sort_order not in SORT_ORDERS:
        raise ValidationError("Invalid sort_order parameter")
    return sort_by, sort_order


def _field_key(task: Task, field: str):
    value = getattr(task, field)
    if field == "title":
        return value.casefold()
    return value


def _split(tasks: Sequence[Task], present) -> Tuple[List[Task], List[Task]]:
    kept, rest = [], []
    for task in tasks:
        (kept if present(task) else rest).append(task)
    return kept, rest


def sort_tasks(tasks: Iterable[Task], sort_by: str = DEFAULT_SORT_BY, sort_order: str = DEFAULT_SORT_ORDER) -> List[Task]:
    sort_by, sort_order = validate_sort(sort_by, sort_order)
    descending = sort_order == "desc"

    # successive stable sorts, least significant key first; id is the final tie-break
    ordered = sorted(tasks, key=lambda t: t.id)

    if sort_by == "priority":
        ranked, unranked = _split(ordered, lambda t: priority_rank(t.priority) != UNRANKED)
        ranked.sort(key=lambda t: priority_rank(t.priority), reverse=descending)
        return ranked + unranked

    with_value, without_value = _split(ordered, lambda t: getattr(t, sort_by) is not None)
    with_value.sort(key=lambda t: _field_key(t, sort_by), reverse=descending)
    ordered = with_value + without_value

    ordered.sort(key=lambda t: priority_rank(t.priority))
    return ordered
