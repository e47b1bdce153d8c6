"""Shared points total for one signed-in user."""

from __future__ import annotations

from focusforge.exceptions import PersistenceError
from focusforge.repositories.repository import PointsRepository
from focusforge.utils.logger import get_logger


class PointsContext:
    """The user's points total, shared by the timer and the stats panel.

    Readers use :attr:`value`. The only writers are :meth:`refresh` (reload
    from the backend) and :meth:`increment` (remote increment, then local
    update).
    """

    def __init__(self, repository: PointsRepository, user_id: str, value: int = 0):
        self.repository = repository
        self.user_id = user_id
        self._value = value

    @property
    def value(self) -> int:
        return self._value

    async def refresh(self) -> int:
        """Reload the total from the backend; on failure keep the last value."""
        try:
            self._value = await self.repository.get_points(self.user_id)
        except PersistenceError as e:
            get_logger("points").error("Error fetching points: %s", e)
        return self._value

    async def increment(self, amount: int) -> int:
        """Add *amount* remotely, then locally.

        Raises:
            PersistenceError: If the remote increment fails; the local value
                is left unchanged
        """
        await self.repository.increment_points(self.user_id, amount)
        self._value += amount
        return self._value
