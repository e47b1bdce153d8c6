"""List ordering helpers for drag-to-reorder."""

from __future__ import annotations

from typing import TypeVar

from focusforge.models.core import Task

T = TypeVar("T")


def move_item(items: list[T], from_index: int, to_index: int) -> list[T]:
    """Return a copy of *items* with the element at *from_index* moved to *to_index*.

    Splice semantics: the element is removed from its old slot and inserted at
    the new one, so everything between the two indexes shifts by one.

    Raises:
        IndexError: If either index is outside the list
    """
    size = len(items)
    if not (0 <= from_index < size and 0 <= to_index < size):
        raise IndexError(
            f"move_item indexes out of range: {from_index} -> {to_index} (size {size})"
        )
    result = list(items)
    result.insert(to_index, result.pop(from_index))
    return result


def index_of(tasks: list[Task], task_id: str) -> int | None:
    """Index of the task with *task_id*, or None."""
    for i, task in enumerate(tasks):
        if task.id == task_id:
            return i
    return None


def reorder_tasks(tasks: list[Task], moved_id: str, target_id: str) -> list[Task] | None:
    """Move the task *moved_id* to the slot currently held by *target_id*.

    Returns the reordered list with every ``position`` renumbered to its
    index, or None when nothing should change (same id, or either id
    missing). The input list and its tasks are not modified.
    """
    if moved_id == target_id:
        return None
    old_index = index_of(tasks, moved_id)
    new_index = index_of(tasks, target_id)
    if old_index is None or new_index is None:
        return None

    moved = move_item(tasks, old_index, new_index)
    return [task.model_copy(update={"position": i}) for i, task in enumerate(moved)]


def next_position(tasks: list[Task]) -> int:
    """Position for a newly added task: one past the highest, or 0."""
    if not tasks:
        return 0
    return max(task.position for task in tasks) + 1
