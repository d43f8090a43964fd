"""Pydantic data models for armies, buff tokens, and relationships."""

from .relationships import Relationship, relationship_of
from .tokens import Token, VisibilityPolicy, TimeConsumption, EventConsumption, ConsumptionPolicy
from .army import Army

__all__ = [
    "Army",
    "Token",
    "VisibilityPolicy",
    "TimeConsumption",
    "EventConsumption",
    "ConsumptionPolicy",
    "Relationship",
    "relationship_of",
]
