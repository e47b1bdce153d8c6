"""Task board - ordered task list with remote persistence.

Every mutation is written to the backend and then the list is re-fetched;
only reorder updates the local list first so the new order shows at once.
"""

from __future__ import annotations

from datetime import UTC, datetime

from focusforge.exceptions import PersistenceError
from focusforge.models import Priority, Task, TaskCreate, TaskUpdate
from focusforge.repositories import TaskRepository
from focusforge.utils.logger import get_logger
from focusforge.utils.ordering import next_position, reorder_tasks
from focusforge.utils.ui.notifications import Notifier


class TaskBoard:
    """View state and operations for one user's task list.

    Attributes:
        tasks: Tasks as last fetched (or as locally reordered)
        draft_title: Contents of the "new task" input
        draft_priority: Priority selected for the next new task
    """

    def __init__(
        self,
        repository: TaskRepository,
        user_id: str,
        notifier: Notifier | None = None,
    ):
        """Initialize the task board.

        Args:
            repository: TaskRepository implementation for data access
            user_id: Owner of the tasks shown on this board
            notifier: Where user-visible messages go
        """
        self.repository = repository
        self.user_id = user_id
        self.notifier = notifier or Notifier()
        self.tasks: list[Task] = []
        self.draft_title = ""
        self.draft_priority = Priority.MEDIUM

    async def refresh(self) -> list[Task]:
        """Fetch the user's tasks ordered by position.

        On failure the error is logged and the previous list is kept.
        """
        try:
            self.tasks = await self.repository.list_for_user(self.user_id)
        except PersistenceError as e:
            get_logger("tasks").error("Error fetching tasks: %s", e)
        return self.tasks

    async def add(
        self, title: str | None = None, priority: Priority | str | None = None
    ) -> Task | None:
        """Add a task at the end of the list.

        Args:
            title: Task title; defaults to :attr:`draft_title`
            priority: Task priority; defaults to :attr:`draft_priority`

        Returns:
            The created task, or None if the title was blank or saving failed
        """
        if title is None:
            title = self.draft_title
        if not title or not title.strip():
            return None
        priority = Priority(priority) if priority is not None else self.draft_priority

        task_data = TaskCreate(
            user_id=self.user_id,
            title=title,
            priority=priority,
            position=next_position(self.tasks),
        )
        try:
            created = await self.repository.add(task_data)
        except PersistenceError as e:
            get_logger("tasks").error("Error adding task: %s", e)
            self.notifier.error("Failed to add task")
            return None

        self.draft_title = ""
        await self.refresh()
        self.notifier.success("Task added!")
        return created

    async def toggle(self, task: Task) -> bool:
        """Flip a task's completed flag and stamp or clear ``completed_at``.

        Returns:
            True if the update was saved
        """
        completed = not task.completed
        updates = TaskUpdate(
            completed=completed,
            completed_at=datetime.now(UTC) if completed else None,
        )
        try:
            await self.repository.update(task.id, updates)
        except PersistenceError as e:
            get_logger("tasks").error("Error updating task %s: %s", task.id, e)
            self.notifier.error("Failed to update task")
            return False

        await self.refresh()
        return True

    async def delete(self, task_id: str) -> bool:
        """Delete a task.

        Returns:
            True if the task was deleted
        """
        try:
            await self.repository.delete(task_id)
        except PersistenceError as e:
            get_logger("tasks").error("Error deleting task %s: %s", task_id, e)
            self.notifier.error("Failed to delete task")
            return False

        await self.refresh()
        self.notifier.success("Task deleted")
        return True

    async def reorder(self, moved_id: str, target_id: str) -> bool:
        """Move a task to the slot of the task it was dropped onto.

        The local list is replaced immediately; then every task's new
        position is written one at a time, each write awaited before the
        next. A failed write stops the sequence: the remaining writes are
        skipped and nothing is rolled back, so the backend may hold a mix of
        old and new positions.

        Returns:
            True if the order changed and every position was saved
        """
        reordered = reorder_tasks(self.tasks, moved_id, target_id)
        if reordered is None:
            return False

        self.tasks = reordered
        for task in reordered:
            try:
                await self.repository.update(task.id, TaskUpdate(position=task.position))
            except PersistenceError as e:
                get_logger("tasks").error(
                    "Error saving position %d for task %s: %s", task.position, task.id, e
                )
                self.notifier.error("Failed to save task order")
                return False
        return True
