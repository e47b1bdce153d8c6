"""Domain models for tasks, focus sessions and reward quotes."""

from __future__ import annotations

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, Field, field_validator


class Priority(str, Enum):
    """Task priority levels."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class Task(BaseModel):
    """A task row owned by a single user.

    Attributes:
        id: Unique identifier assigned by the backend
        user_id: Owning user
        title: Non-empty task title
        priority: low, medium or high
        completed: Whether the task is done
        position: Zero-based rank in the owner's list (lower shows first)
        completed_at: When the task was completed, None while open
        created_at: Row creation timestamp, if the backend returns it
    """

    id: str
    user_id: str
    title: str
    priority: Priority = Priority.MEDIUM
    completed: bool = False
    position: int = Field(default=0, ge=0)
    completed_at: datetime | None = None
    created_at: datetime | None = None


class TaskCreate(BaseModel):
    """Payload for inserting a new task."""

    user_id: str
    title: str
    priority: Priority = Priority.MEDIUM
    position: int = Field(default=0, ge=0)

    @field_validator("title")
    @classmethod
    def validate_title(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("title cannot be empty")
        return v.strip()


class TaskUpdate(BaseModel):
    """Partial update for a task.

    Only fields that were explicitly set are sent to the backend, so
    ``TaskUpdate(completed=False, completed_at=None)`` clears the timestamp
    while ``TaskUpdate(position=3)`` leaves it alone.
    """

    title: str | None = None
    priority: Priority | None = None
    completed: bool | None = None
    completed_at: datetime | None = None
    position: int | None = Field(default=None, ge=0)

    def to_payload(self) -> dict:
        """Serialize the explicitly set fields for the wire."""
        return self.model_dump(mode="json", exclude_unset=True)


class FocusSession(BaseModel):
    """A completed Pomodoro session. Immutable once written."""

    id: str | None = None
    user_id: str
    duration_minutes: int
    points_earned: int
    created_at: datetime | None = None


class FocusSessionCreate(BaseModel):
    """Payload for recording a completed session."""

    user_id: str
    duration_minutes: int = Field(gt=0)
    points_earned: int = Field(ge=0)


class Quote(BaseModel):
    """A motivational quote from the public quote service."""

    content: str
    author: str | None = None

    @field_validator("content")
    @classmethod
    def validate_content(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("quote content cannot be empty")
        return v.strip()
