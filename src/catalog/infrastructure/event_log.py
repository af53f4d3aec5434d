"""Default domain-event sink: writes each drained event to the log.

Downstream publication (message broker, webhooks) would plug in here as
another callable with the same signature.
"""

from __future__ import annotations

import logging
from typing import Callable, Sequence

from catalog.domain.events import DomainEvent

logger = logging.getLogger(__name__)

EventSink = Callable[[Sequence[DomainEvent]], None]


def log_domain_events(events: Sequence[DomainEvent]) -> None:
    for event in events:
        logger.info(
            "Domain event %s (%s) at %s",
            event.event_type,
            event.event_id,
            event.occurred_on.isoformat(),
        )
