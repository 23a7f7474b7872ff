"""
Change-feed adapter: turns profile/posting change events into recompute calls.

Events come from whatever push source the deployment wires up (database
notifications, a queue consumer, the HTTP endpoint). The adapter only
decides whether an event can affect scores and, if so, which scoped
recompute to run.
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, FrozenSet, Iterable, List, Optional, Tuple

from core.errors import InputError, MatchEngineError
from core.recompute.service import RecomputeService
from core.sync import SyncReport

logger = logging.getLogger(__name__)

ENTITY_TALENT = 'talent'
ENTITY_STARTUP = 'startup'

# Fields whose change can move a score
SCORING_FIELDS: Dict[str, FrozenSet[str]] = {
    ENTITY_TALENT: frozenset({'skills', 'bio'}),
    ENTITY_STARTUP: frozenset({'skills', 'industry', 'stage'}),
}


@dataclass(frozen=True)
class ChangeEvent:
    """A profile or posting change; changed_fields=None means created/unknown."""
    entity_type: str
    id: str
    changed_fields: Optional[Tuple[str, ...]] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ChangeEvent":
        entity_type = data.get('entity_type') or data.get('entityType')
        entity_id = data.get('id')
        fields = data.get('changed_fields', data.get('changedFields'))

        if entity_type not in SCORING_FIELDS:
            raise InputError(f"Unknown entity_type: {entity_type!r}")
        if not entity_id:
            raise InputError("Change event is missing an id")

        return cls(
            entity_type=entity_type,
            id=str(entity_id),
            changed_fields=tuple(fields) if fields else None,
        )


@dataclass
class ChangeOutcome:
    """Result of one collapsed event: a report, None when skipped, or the error it raised."""
    event: ChangeEvent
    report: Optional[SyncReport] = None
    error: Optional[MatchEngineError] = None

    @property
    def ok(self) -> bool:
        return self.error is None and (self.report is None or self.report.ok)


class ChangeFeedAdapter:
    def __init__(self, recompute_service: RecomputeService):
        self.recompute_service = recompute_service

    @staticmethod
    def is_relevant(event: ChangeEvent) -> bool:
        if event.entity_type not in SCORING_FIELDS:
            raise InputError(f"Unknown entity_type: {event.entity_type!r}")
        if not event.changed_fields:
            return True
        return bool(SCORING_FIELDS[event.entity_type] & set(event.changed_fields))

    def handle(self, event: ChangeEvent) -> Optional[SyncReport]:
        """Recompute for the event's entity, or return None when nothing scoring-relevant changed."""
        if not self.is_relevant(event):
            logger.debug(
                f"Ignoring {event.entity_type} {event.id} change: {list(event.changed_fields)}"
            )
            return None

        logger.info(f"Change event for {event.entity_type} {event.id}, recomputing matches")
        if event.entity_type == ENTITY_TALENT:
            return self.recompute_service.recompute_for_talent(event.id)
        return self.recompute_service.recompute_for_startup(event.id)

    def handle_many(self, events: Iterable[ChangeEvent]) -> List[ChangeOutcome]:
        """Handle a batch, collapsing repeated events for the same entity.

        Each entity is handled on its own; an error for one is recorded in
        its outcome and the rest of the batch still runs.
        """
        pending: Dict[Tuple[str, str], ChangeEvent] = {}
        for event in events:
            key = (event.entity_type, event.id)
            if key in pending and self.is_relevant(pending[key]):
                continue
            pending[key] = event

        outcomes = []
        for event in pending.values():
            try:
                outcomes.append(ChangeOutcome(event, report=self.handle(event)))
            except MatchEngineError as e:
                logger.warning(f"Change event for {event.entity_type} {event.id} failed: {e}")
                outcomes.append(ChangeOutcome(event, error=e))
        return outcomes
