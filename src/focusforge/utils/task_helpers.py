"""Task helper utilities."""

from focusforge.models.core import Task


def resolve_task_ref(tasks: list[Task], ref: str) -> Task:
    """
    Resolve a user-supplied task reference against the displayed list.

    A reference is either the 1-based number shown by ``tasks list``, a full
    task ID, or a unique ID suffix.

    Args:
        tasks: Tasks in display order
        ref: Number, ID or ID suffix

    Returns:
        The matching task

    Raises:
        ValueError: If no task or more than one task matches
    """
    ref = ref.strip()
    if not ref:
        raise ValueError("Empty task reference")

    if ref.isdigit() and 1 <= int(ref) <= len(tasks):
        return tasks[int(ref) - 1]

    for task in tasks:
        if task.id == ref:
            return task

    matches = [task for task in tasks if task.id.endswith(ref)]
    if not matches:
        raise ValueError(f"No task matches '{ref}'")
    if len(matches) > 1:
        raise ValueError(
            f"Ambiguous task reference '{ref}' matches {len(matches)} tasks"
        )
    return matches[0]
