"""Consumption log - chronological record of tokens leaving play."""

from __future__ import annotations
from datetime import datetime, timezone
from enum import Enum
from pydantic import BaseModel, Field

from warbuffs.models.relationships import EntityId


class ConsumptionTrigger(str, Enum):
    """What consumed a token."""
    TIME = "time"
    EVENT = "event"


class ConsumptionRecord(BaseModel):
    """One token consumption, as observed by the battlefield."""
    token_id: EntityId
    army_id: EntityId
    trigger: ConsumptionTrigger
    detail: str  # Event name, or the time point that expired the token
    recorded_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    def summary(self) -> str:
        """Generate human-readable summary."""
        return f"[{self.army_id}] {self.token_id} consumed by {self.trigger.value}: {self.detail}"


class ConsumptionLog:
    """System for keeping the consumption history of a battlefield."""

    def __init__(self) -> None:
        self._records: list[ConsumptionRecord] = []

    def add(self, record: ConsumptionRecord) -> None:
        """Add a record to the log."""
        self._records.append(record)

    def get_recent(self, count: int = 10) -> list[ConsumptionRecord]:
        """Get most recent records."""
        return self._records[-count:] if self._records and count > 0 else []

    def get_all(self) -> list[ConsumptionRecord]:
        """Get all records."""
        return list(self._records)

    def get_by_army(self, army_id: EntityId) -> list[ConsumptionRecord]:
        """Get records for tokens owned by one army."""
        return [r for r in self._records if r.army_id == army_id]

    def get_by_trigger(self, trigger: ConsumptionTrigger) -> list[ConsumptionRecord]:
        """Get records of one trigger kind."""
        return [r for r in self._records if r.trigger == trigger]

    def find(self, token_id: EntityId) -> list[ConsumptionRecord]:
        """Get every record for a token id, oldest first.

        Token ids are not unique, so several tokens may share one.
        """
        return [r for r in self._records if r.token_id == token_id]

    def count(self) -> int:
        """Total number of records."""
        return len(self._records)

    def summary(self, count: int = 10) -> str:
        """Generate summary of recent consumptions."""
        recent = self.get_recent(count)
        if not recent:
            return "No tokens consumed."
        return "\n".join(r.summary() for r in recent)

    def export(self) -> list[dict]:
        """Export all records for serialization."""
        return [r.model_dump(mode="json") for r in self._records]

    def clear(self) -> None:
        """Clear all records."""
        self._records.clear()
