"""Buff token schemas - visibility and consumption policies."""

from __future__ import annotations
import logging
from datetime import datetime, timedelta, timezone
from enum import Enum
from typing import Annotated, Literal, Optional, Union, TYPE_CHECKING
from pydantic import BaseModel, Field, PrivateAttr, field_validator

from warbuffs.models.relationships import EntityId, Relationship, relationship_of

if TYPE_CHECKING:
    from warbuffs.models.army import Army


logger = logging.getLogger(__name__)


class VisibilityPolicy(str, Enum):
    """Which relationship classes may observe a token.

    The names widen in this order; ENEMIES means visible to everyone.
    """
    OWN = "own"
    ALLIES = "allies"
    NEUTRALS = "neutrals"
    ENEMIES = "enemies"


_AUDIENCE: dict[VisibilityPolicy, frozenset[Relationship]] = {
    VisibilityPolicy.OWN: frozenset({Relationship.OWN}),
    VisibilityPolicy.ALLIES: frozenset({Relationship.OWN, Relationship.ALLY}),
    VisibilityPolicy.NEUTRALS: frozenset({Relationship.OWN, Relationship.ALLY, Relationship.NEUTRAL}),
    VisibilityPolicy.ENEMIES: frozenset(Relationship),
}


class TimeConsumption(BaseModel):
    """Token expires once `ttl` has elapsed since it was created."""
    kind: Literal["time"] = "time"
    ttl: timedelta

    model_config = {"frozen": True}


class EventConsumption(BaseModel):
    """Token is consumed when the named game event is raised."""
    kind: Literal["event"] = "event"
    event: str

    model_config = {"frozen": True}


ConsumptionPolicy = Annotated[
    Union[TimeConsumption, EventConsumption],
    Field(discriminator="kind"),
]


def as_aware(moment: datetime) -> datetime:
    """Naive datetimes are read as local time."""
    if moment.tzinfo is None:
        return moment.astimezone()
    return moment


class Token(BaseModel):
    """A transient buff owned by exactly one army.

    Everything is fixed at construction except the consumed flag, which starts
    False and only flips to True through `expire()` or `consume_by_event()`.
    Times are compared timezone-aware; naive inputs count as local time.
    """
    id: EntityId = Field(frozen=True)
    kind: str = Field(frozen=True, description="Buff tag, e.g. attack, defense, speed")
    magnitude: float = Field(frozen=True, description="Buff amount, carried for the caller")

    # Unknown strings are kept as-is and never match any viewer
    visibility: Union[VisibilityPolicy, str] = Field(frozen=True, union_mode="left_to_right")
    consumption: ConsumptionPolicy = Field(frozen=True)

    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc), frozen=True)

    _consumed: bool = PrivateAttr(default=False)

    @field_validator("visibility")
    @classmethod
    def flag_unknown_visibility(cls, value: Union[VisibilityPolicy, str]) -> Union[VisibilityPolicy, str]:
        if not isinstance(value, VisibilityPolicy):
            logger.warning(f"Unrecognized visibility policy {value!r}; token will be visible to no one")
        return value

    @field_validator("created_at")
    @classmethod
    def make_created_at_aware(cls, value: datetime) -> datetime:
        return as_aware(value)

    @property
    def consumed(self) -> bool:
        """Read-only; set by the consumption triggers."""
        return self._consumed

    def is_visible_to(self, viewer: "Army", owner: "Army") -> bool:
        """Whether `viewer` may see this token, which `owner` holds."""
        if self.consumed:
            return False

        audience = _AUDIENCE.get(self.visibility)
        if audience is None:
            return False

        return relationship_of(viewer, owner) in audience

    @property
    def expires_at(self) -> Optional[datetime]:
        """When a time-based token runs out; None for event-based tokens."""
        if isinstance(self.consumption, TimeConsumption):
            return self.created_at + self.consumption.ttl
        return None

    def should_expire(self, current_time: datetime) -> bool:
        """Check the time trigger without changing state."""
        if self.consumed:
            return False

        if isinstance(self.consumption, TimeConsumption):
            return (as_aware(current_time) - self.created_at) >= self.consumption.ttl
        return False

    def expire(self) -> bool:
        """Mark consumed. Returns False if it already was."""
        if self.consumed:
            return False
        self._consumed = True
        logger.info(f"Token {self.id} consumed")
        return True

    def consume_by_event(self, event_name: str) -> bool:
        """Consume if this token waits for `event_name`. Returns True on change."""
        if self.consumed:
            return False

        if isinstance(self.consumption, EventConsumption) and self.consumption.event == event_name:
            self._consumed = True
            logger.info(f"Token {self.id} consumed by event '{event_name}'")
            return True
        return False

    def summary(self) -> str:
        """Generate human-readable summary."""
        visibility = self.visibility.value if isinstance(self.visibility, VisibilityPolicy) else self.visibility
        if isinstance(self.consumption, TimeConsumption):
            trigger = f"ttl {self.consumption.ttl}"
        else:
            trigger = f"on '{self.consumption.event}'"
        status = "consumed" if self.consumed else "active"
        return f"[{self.id}] {self.kind} {self.magnitude:+g} ({visibility}, {trigger}) - {status}"
