"""
Booking status lifecycle.

``ALLOWED_TRANSITIONS`` lists, for every status, the statuses a
booking may move to next.  Whether the table is enforced depends on
``settings.booking_transitions``: in ``permissive`` mode any status
may overwrite any other, in ``strict`` mode ``check_transition``
rejects moves that are not in the table.

A dispute can be raised once a provider has confirmed the booking and
up to after completion.  ``cancelled`` and ``disputed`` are final.
"""

import logging
from typing import Dict, FrozenSet, Optional

from ..core.config import settings
from ..core.errors import InvalidTransitionError
from ..schemas.booking import BookingStatus


logger = logging.getLogger(__name__)

ALLOWED_TRANSITIONS: Dict[BookingStatus, FrozenSet[BookingStatus]] = {
    BookingStatus.PENDING: frozenset({BookingStatus.CONFIRMED, BookingStatus.CANCELLED}),
    BookingStatus.CONFIRMED: frozenset({
        BookingStatus.IN_PROGRESS,
        BookingStatus.COMPLETED,
        BookingStatus.CANCELLED,
        BookingStatus.DISPUTED,
    }),
    BookingStatus.IN_PROGRESS: frozenset({
        BookingStatus.COMPLETED,
        BookingStatus.CANCELLED,
        BookingStatus.DISPUTED,
    }),
    BookingStatus.COMPLETED: frozenset({BookingStatus.DISPUTED}),
    BookingStatus.CANCELLED: frozenset(),
    BookingStatus.DISPUTED: frozenset(),
}

ACTIVE_STATUSES: FrozenSet[BookingStatus] = frozenset({
    BookingStatus.PENDING,
    BookingStatus.CONFIRMED,
    BookingStatus.IN_PROGRESS,
})

TERMINAL_STATUSES: FrozenSet[BookingStatus] = frozenset(
    status for status, targets in ALLOWED_TRANSITIONS.items() if not targets
)


def is_transition_allowed(current: BookingStatus, target: BookingStatus) -> bool:
    """Return True if ``current -> target`` appears in the table.

    Re‑applying the current status is always allowed.
    """
    current, target = BookingStatus(current), BookingStatus(target)
    return current == target or target in ALLOWED_TRANSITIONS[current]


def check_transition(
    current: BookingStatus,
    target: BookingStatus,
    strict: Optional[bool] = None,
) -> None:
    """Raise ``InvalidTransitionError`` for a disallowed move in strict mode.

    ``strict`` defaults to the configured mode.  In permissive mode a
    move outside the table is only logged.
    """
    if strict is None:
        strict = settings.strict_transitions
    if is_transition_allowed(current, target):
        return
    current, target = BookingStatus(current), BookingStatus(target)
    if strict:
        logger.warning("Rejected booking transition %s -> %s", current.value, target.value)
        raise InvalidTransitionError(current.value, target.value)
    logger.info("Unlisted booking transition %s -> %s accepted (permissive mode)", current.value, target.value)
