"""Battlefield - registry of armies that fans triggers out to all of them."""

from __future__ import annotations
import logging
from datetime import datetime
from typing import Optional

from warbuffs.models.army import Army
from warbuffs.models.relationships import EntityId
from warbuffs.models.tokens import Token
from warbuffs.systems.consumption_log import ConsumptionLog, ConsumptionRecord, ConsumptionTrigger


logger = logging.getLogger(__name__)


class Battlefield:
    """Holds every army in a session and broadcasts time points and events.

    Keeps no clock of its own: each call is handed the time or event name.
    Not synchronized; a threaded host must serialize calls.
    """

    def __init__(self, log: Optional[ConsumptionLog] = None):
        self._armies: dict[EntityId, Army] = {}
        self.log = log if log is not None else ConsumptionLog()

    def register(self, army: Army) -> None:
        """Add an army. Ids must be unique within a battlefield."""
        if army.id in self._armies:
            raise ValueError(f"Army already registered: {army.id}")
        self._armies[army.id] = army
        logger.debug(f"Registered army {army.id} ({army.name})")

    def get_army(self, army_id: EntityId) -> Optional[Army]:
        """Get an army by id."""
        return self._armies.get(army_id)

    def list_armies(self) -> list[Army]:
        """All armies, in registration order."""
        return list(self._armies.values())

    def advance_to(self, current_time: datetime) -> list[ConsumptionRecord]:
        """Apply the time trigger at `current_time` to every army."""
        records: list[ConsumptionRecord] = []
        for army in self._armies.values():
            for token in army.process_time_expiration(current_time):
                records.append(ConsumptionRecord(
                    token_id=token.id,
                    army_id=army.id,
                    trigger=ConsumptionTrigger.TIME,
                    detail=current_time.isoformat(),
                ))
        self._record(records)
        return records

    def raise_event(self, event_name: str) -> list[ConsumptionRecord]:
        """Apply the event trigger for `event_name` to every army."""
        records: list[ConsumptionRecord] = []
        for army in self._armies.values():
            for token in army.process_event(event_name):
                records.append(ConsumptionRecord(
                    token_id=token.id,
                    army_id=army.id,
                    trigger=ConsumptionTrigger.EVENT,
                    detail=event_name,
                ))
        self._record(records)
        return records

    def _record(self, records: list[ConsumptionRecord]) -> None:
        for record in records:
            self.log.add(record)
        if records:
            logger.info(f"{len(records)} token(s) consumed: {', '.join(str(r.token_id) for r in records)}")

    def visible_tokens(self, owner_id: EntityId, viewer_id: EntityId) -> list[Token]:
        """Tokens of `owner_id` that `viewer_id` may see."""
        owner = self._require(owner_id)
        viewer = self._require(viewer_id)
        return owner.get_visible_tokens(viewer)

    def _require(self, army_id: EntityId) -> Army:
        army = self._armies.get(army_id)
        if army is None:
            raise ValueError(f"Unknown army: {army_id}")
        return army

    def visibility_matrix(self) -> dict[EntityId, dict[EntityId, list[EntityId]]]:
        """For each owner, the token ids each viewer can currently see."""
        return {
            owner.id: {
                viewer.id: [t.id for t in owner.get_visible_tokens(viewer)]
                for viewer in self._armies.values()
            }
            for owner in self._armies.values()
        }

    def summary(self) -> str:
        """Generate a summary of every army."""
        if not self._armies:
            return "No armies on the battlefield."
        return "\n\n".join(army.summary() for army in self._armies.values())
