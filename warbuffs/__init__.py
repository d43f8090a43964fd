"""Buff tokens for armies: who can see them, and when they run out."""

from .models import (
    Army,
    Token,
    VisibilityPolicy,
    TimeConsumption,
    EventConsumption,
    Relationship,
    relationship_of,
)
from .systems import Battlefield, ConsumptionLog, ConsumptionRecord, ConsumptionTrigger

__all__ = [
    "Army",
    "Token",
    "VisibilityPolicy",
    "TimeConsumption",
    "EventConsumption",
    "Relationship",
    "relationship_of",
    "Battlefield",
    "ConsumptionLog",
    "ConsumptionRecord",
    "ConsumptionTrigger",
]
