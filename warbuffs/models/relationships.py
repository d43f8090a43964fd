"""Relationship resolution between armies."""

from __future__ import annotations
from enum import Enum
from typing import Union, TYPE_CHECKING

if TYPE_CHECKING:
    from warbuffs.models.army import Army


# Caller-assigned id for armies and tokens; compared by equality only
EntityId = Union[str, int]


class Relationship(str, Enum):
    """How one army classifies another."""
    OWN = "own"
    ALLY = "ally"
    ENEMY = "enemy"
    NEUTRAL = "neutral"


def relationship_of(viewer: "Army", owner: "Army") -> Relationship:
    """Classify `owner` from `viewer`'s point of view.

    Checked in order own, ally, enemy, neutral. An id listed as both ally
    and enemy resolves to ally.
    """
    if viewer.id == owner.id:
        return Relationship.OWN
    if owner.id in viewer.allies:
        return Relationship.ALLY
    if owner.id in viewer.enemies:
        return Relationship.ENEMY
    return Relationship.NEUTRAL
