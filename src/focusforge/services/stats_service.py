"""Stats panel - session count, next reward and the reward quote."""

from __future__ import annotations

from focusforge.exceptions import PersistenceError, QuoteServiceError
from focusforge.repositories import FocusSessionRepository
from focusforge.services.api.quotes import QuotesAPI
from focusforge.utils.logger import get_logger

REWARD_STEP = 50


def next_reward_threshold(points: int) -> int:
    """Smallest positive multiple of REWARD_STEP that is >= *points*.

    >>> [next_reward_threshold(p) for p in (0, 50, 51, 150)]
    [50, 50, 100, 150]
    """
    steps = -(-points // REWARD_STEP)
    return max(steps, 1) * REWARD_STEP


class StatsPanel:
    """Read-only view over the user's sessions and rewards.

    The quote is fetched at most once per panel: after the first successful
    fetch it is kept until the panel is discarded.
    """

    def __init__(
        self,
        session_repository: FocusSessionRepository,
        quotes_api: QuotesAPI,
        user_id: str,
    ):
        self.sessions = session_repository
        self.quotes_api = quotes_api
        self.user_id = user_id
        self.points = 0
        self.session_count = 0
        self.quote: str | None = None
        self._last_refresh: tuple[int, str] | None = None

    @property
    def next_reward(self) -> int:
        return next_reward_threshold(self.points)

    @property
    def reward_unlocked(self) -> bool:
        """Whether the reward quote should be shown."""
        return self.quote is not None and self.points >= REWARD_STEP

    async def sync(self, points: int, user_id: str | None = None) -> None:
        """Refresh only if the points value or the user changed."""
        user_id = user_id or self.user_id
        if self._last_refresh == (points, user_id):
            return
        await self.refresh(points, user_id)

    async def refresh(self, points: int, user_id: str | None = None) -> None:
        """Reload the session count and, once unlocked, fetch the reward quote.

        Failures are logged only; the panel keeps what it already shows.
        """
        logger = get_logger("stats")
        if user_id is not None:
            self.user_id = user_id
        self.points = points
        self._last_refresh = (points, self.user_id)

        try:
            self.session_count = await self.sessions.count_for_user(self.user_id)
        except PersistenceError as e:
            logger.error("Error counting focus sessions: %s", e)

        if points >= REWARD_STEP and self.quote is None:
            try:
                quote = await self.quotes_api.random_quote()
            except QuoteServiceError as e:
                logger.error("Failed to fetch quote: %s", e)
            else:
                self.quote = quote.content
