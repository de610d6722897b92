"""Todo data model using Pydantic."""

from __future__ import annotations

from datetime import datetime, timezone

from pydantic import AwareDatetime, BaseModel, ConfigDict, Field


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class Todo(BaseModel):
    """A single todo entry, also the shape of one line in the todos file.

    Field order is the key order written to disk.
    """

    id: int = Field(..., gt=0)
    text: str
    completed: bool = False
    created_at: AwareDatetime

    model_config = ConfigDict(frozen=True, extra="ignore")

    def to_line(self) -> str:
        """Serialize as a single JSON Lines record (without the newline)."""
        return self.model_dump_json()

    @classmethod
    def from_line(cls, line: str | bytes) -> "Todo":
        """Parse one JSON Lines record; raises pydantic.ValidationError."""
        return cls.model_validate_json(line)

    def toggled(self) -> "Todo":
        return self.model_copy(update={"completed": not self.completed})
