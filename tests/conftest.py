"""
Pytest fixtures for the warbuffs test suite.

Provides a fixed clock, the four-army diplomacy setup, and a token factory.
"""

import pytest
from datetime import datetime, timedelta, timezone

from warbuffs.models import Army, Token, VisibilityPolicy, TimeConsumption, EventConsumption


T0 = datetime(2024, 3, 1, 12, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def t0():
    """Fixed creation time for tokens."""
    return T0


@pytest.fixture
def armies():
    """A and B allied, A and D enemies, C neutral to everyone."""
    a = Army(id="A", name="Player A")
    b = Army(id="B", name="Player B")
    c = Army(id="C", name="Player C")
    d = Army(id="D", name="Player D")

    a.allies = {"B"}
    b.allies = {"A"}
    a.enemies = {"D"}
    d.enemies = {"A"}

    return {"A": a, "B": b, "C": c, "D": d}


@pytest.fixture
def make_token(t0):
    """Build a token with a fixed created_at.

    Pass `ttl` (seconds) for a time-based token or `event` for an event-based one.
    """
    def _make(token_id, visibility="own", *, ttl=None, event=None, kind="attack", magnitude=10):
        if event is not None:
            consumption = EventConsumption(event=event)
        else:
            consumption = TimeConsumption(ttl=timedelta(seconds=ttl if ttl is not None else 1000))
        return Token(
            id=token_id,
            kind=kind,
            magnitude=magnitude,
            visibility=visibility,
            consumption=consumption,
            created_at=t0,
        )

    return _make
