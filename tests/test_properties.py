"""Invariants checked over every policy, trigger, and viewer combination."""

from datetime import timedelta

import pytest

from warbuffs.models import VisibilityPolicy


POLICIES = [VisibilityPolicy.OWN, VisibilityPolicy.ALLIES, VisibilityPolicy.NEUTRALS, VisibilityPolicy.ENEMIES]


def audience(token, owner, armies):
    return {key for key, viewer in armies.items() if token.is_visible_to(viewer, owner)}


def consumed_state(army):
    return [(t.id, t.consumed) for t in army.tokens]


def test_policy_audiences_are_nested(armies, make_token):
    owner = armies["A"]
    audiences = [audience(make_token(f"t-{p.value}", p), owner, armies) for p in POLICIES]

    for narrower, wider in zip(audiences, audiences[1:]):
        assert narrower <= wider
    assert audiences[-1] == set(armies)


@pytest.mark.parametrize("policy", POLICIES)
@pytest.mark.parametrize("trigger", ["time", "event"])
def test_consumption_hides_token_from_every_viewer(armies, make_token, t0, policy, trigger):
    owner = armies["A"]
    if trigger == "time":
        token = make_token("t1", policy, ttl=10)
    else:
        token = make_token("t1", policy, event="battle")
    owner.add_token(token)
    assert "A" in audience(token, owner, armies)

    owner.process_time_expiration(t0 + timedelta(seconds=10))
    owner.process_event("battle")

    assert audience(token, owner, armies) == set()
    for viewer in armies.values():
        assert token not in owner.get_visible_tokens(viewer)


def test_consumption_survives_diplomacy_changes(armies, make_token):
    owner = armies["A"]
    token = make_token("t1", VisibilityPolicy.ENEMIES, event="battle")
    owner.add_token(token)
    owner.process_event("battle")

    for viewer in armies.values():
        viewer.allies.add("A")
        viewer.enemies.discard("A")

    assert audience(token, owner, armies) == set()


def test_triggers_are_idempotent(armies, make_token, t0):
    owner = armies["A"]
    owner.add_token(make_token("time", ttl=100))
    owner.add_token(make_token("event", event="battle"))
    owner.add_token(make_token("other", event="siege"))
    later = t0 + timedelta(seconds=100)

    owner.process_time_expiration(later)
    owner.process_event("battle")
    once = consumed_state(owner)

    assert owner.process_time_expiration(later) == []
    assert owner.process_event("battle") == []
    assert consumed_state(owner) == once


def test_time_and_event_triggers_commute(armies, make_token, t0):
    def run(time_first):
        owner = armies["A"].model_copy(deep=True)
        owner.tokens = [make_token("time", ttl=100), make_token("event", event="battle")]
        later = t0 + timedelta(seconds=120)
        if time_first:
            owner.process_time_expiration(later)
            owner.process_event("battle")
        else:
            owner.process_event("battle")
            owner.process_time_expiration(later)
        return {t.id for t in owner.consumed_tokens()}

    assert run(True) == run(False) == {"time", "event"}
