"""
Booking status transition table.

Only consulted when ENFORCE_STATUS_TRANSITIONS is on; by default any valid
status may follow any other, including repeats and backward moves.
"""

from typing import Dict, FrozenSet

from db.enums import BookingStatus

_S = BookingStatus

STATUS_TRANSITIONS: Dict[str, FrozenSet[str]] = {
    _S.PENDING.value: frozenset({_S.CONFIRMED.value, _S.CANCELLED.value}),
    _S.CONFIRMED.value: frozenset({_S.PROCESSING.value, _S.CANCELLED.value}),
    _S.PROCESSING.value: frozenset({_S.SHIPPED.value, _S.CANCELLED.value}),
    _S.SHIPPED.value: frozenset({_S.DELIVERED.value}),
    _S.DELIVERED.value: frozenset(),
    _S.CANCELLED.value: frozenset(),
}


def can_transition(current: str, new: str) -> bool:
    return new in STATUS_TRANSITIONS.get(current, frozenset())
