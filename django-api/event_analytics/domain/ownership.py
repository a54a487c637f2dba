"""Single ownership predicate shared by every calculator."""

import logging

from event_analytics.domain.models import Actor, Event

logger = logging.getLogger(__name__)


def owns_event(actor: Actor | None, event: Event) -> bool:
    """Return True when ``event`` was created by ``actor``.

    Ownership is decided by creator id only. An event whose creator name
    matches the actor but whose id does not is excluded and reported, so
    stale or mismatched creator references show up in the logs.
    """
    if actor is None or event.creator is None:
        return False
    if str(event.creator.id) == str(actor.id):
        return True
    if actor.name and event.creator.name == actor.name:
        logger.warning(
            "Event %s matches actor %s by creator name only; excluded from analytics",
            event.id,
            actor.id,
        )
    return False
