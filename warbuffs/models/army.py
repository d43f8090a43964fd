"""Army schema - relationship sets and the tokens an army owns."""

from __future__ import annotations
import logging
from datetime import datetime
from pydantic import BaseModel, Field

from warbuffs.models.relationships import EntityId, Relationship, relationship_of
from warbuffs.models.tokens import Token


logger = logging.getLogger(__name__)


class Army(BaseModel):
    """A game party (faction) with its diplomacy and owned buff tokens.

    `allies` and `enemies` may be mutated directly at any time; every id in
    neither set is neutral. Tokens are never removed, only flagged consumed,
    so `tokens` keeps insertion order and its full count.
    """
    id: EntityId
    name: str = Field(description="Display name")
    allies: set[EntityId] = Field(default_factory=set)
    enemies: set[EntityId] = Field(default_factory=set)
    tokens: list[Token] = Field(default_factory=list)

    # Lets callers assign plain id lists to allies/enemies
    model_config = {"validate_assignment": True}

    def add_token(self, token: Token) -> None:
        """Attach a token. Duplicate ids are not checked."""
        self.tokens.append(token)
        logger.debug(f"Army {self.id} received token {token.id}")

    def get_visible_tokens(self, viewer: "Army") -> list[Token]:
        """Tokens of this army that `viewer` may see, in insertion order."""
        return [t for t in self.tokens if t.is_visible_to(viewer, self)]

    def process_time_expiration(self, current_time: datetime) -> list[Token]:
        """Expire every time-based token whose ttl has elapsed at `current_time`.

        Returns the tokens consumed by this call.
        """
        expired: list[Token] = []
        for token in self.tokens:
            if token.should_expire(current_time) and token.expire():
                expired.append(token)
        return expired

    def process_event(self, event_name: str) -> list[Token]:
        """Consume every token waiting for `event_name`. Returns the ones consumed."""
        return [t for t in self.tokens if t.consume_by_event(event_name)]

    def active_tokens(self) -> list[Token]:
        """All tokens not yet consumed, regardless of viewer."""
        return [t for t in self.tokens if not t.consumed]

    def consumed_tokens(self) -> list[Token]:
        """All consumed tokens."""
        return [t for t in self.tokens if t.consumed]

    def relationship_to(self, other: "Army") -> Relationship:
        """How this army classifies `other`."""
        return relationship_of(self, other)

    def set_stance(self, other_id: EntityId, relationship: Relationship) -> None:
        """Move `other_id` into allies, enemies, or neither (neutral).

        Keeps the two sets disjoint for that id.
        """
        if relationship == Relationship.OWN or other_id == self.id:
            raise ValueError(f"Army {self.id} cannot set a stance toward itself")

        conflicts = self.diplomacy_conflicts()
        if conflicts:
            logger.warning(f"Army {self.id} lists {sorted(map(str, conflicts))} as both ally and enemy")

        self.allies.discard(other_id)
        self.enemies.discard(other_id)

        if relationship == Relationship.ALLY:
            self.allies.add(other_id)
        elif relationship == Relationship.ENEMY:
            self.enemies.add(other_id)

    def diplomacy_conflicts(self) -> set[EntityId]:
        """Ids listed as both ally and enemy (these resolve to ally)."""
        return set(self.allies) & set(self.enemies)

    def summary(self) -> str:
        """Generate human-readable summary."""
        lines = [
            f"{self.name} ({self.id})",
            f"  Allies: {', '.join(sorted(map(str, self.allies))) or 'none'}",
            f"  Enemies: {', '.join(sorted(map(str, self.enemies))) or 'none'}",
            f"  Tokens: {len(self.active_tokens())} active / {len(self.tokens)} total",
        ]
        for token in self.tokens:
            lines.append(f"    {token.summary()}")
        return "\n".join(lines)
