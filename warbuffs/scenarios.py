"""Ready-made battlefields for demos and tests."""

from __future__ import annotations
from datetime import datetime, timedelta, timezone
from typing import Optional

from warbuffs.models import Army, Token, VisibilityPolicy, TimeConsumption, EventConsumption
from warbuffs.systems.battlefield import Battlefield


def build_four_army_battlefield(now: Optional[datetime] = None) -> Battlefield:
    """Armies A-D: A and B allied, A and D at war, C neutral to everyone.

    A holds one token of each visibility policy, mixing time and event triggers.
    """
    now = now or datetime.now(timezone.utc)

    armies = {key: Army(id=key, name=f"Player {key}") for key in "ABCD"}
    armies["A"].allies.add("B")
    armies["B"].allies.add("A")
    armies["A"].enemies.add("D")
    armies["D"].enemies.add("A")

    a = armies["A"]
    a.add_token(Token(
        id="t1", kind="attack", magnitude=10,
        visibility=VisibilityPolicy.OWN,
        consumption=TimeConsumption(ttl=timedelta(seconds=100)),
        created_at=now,
    ))
    a.add_token(Token(
        id="t2", kind="defense", magnitude=5,
        visibility=VisibilityPolicy.ALLIES,
        consumption=EventConsumption(event="battle"),
        created_at=now,
    ))
    a.add_token(Token(
        id="t3", kind="speed", magnitude=3,
        visibility=VisibilityPolicy.ENEMIES,
        consumption=TimeConsumption(ttl=timedelta(seconds=200)),
        created_at=now,
    ))
    a.add_token(Token(
        id="t4", kind="attack", magnitude=8,
        visibility=VisibilityPolicy.NEUTRALS,
        consumption=EventConsumption(event="siege"),
        created_at=now,
    ))

    battlefield = Battlefield()
    for army in armies.values():
        battlefield.register(army)
    return battlefield
