"""Viability and priority evaluation over a roster for a given day.

All functions are pure and recomputed per (school, day); rosters hold a
handful of schools so nothing is cached.
"""

from enroll_advisor.models import PassStatus, SchoolState
from enroll_advisor.store import Roster


def is_viable(state: SchoolState, today: int) -> bool:
    """A passed school whose enrollment-fee door is still open."""
    return state.passed and (state.fee_paid or today <= state.school.fee_deadline)


def is_gone(state: SchoolState, today: int) -> bool:
    """True when a school no longer needs to be waited on.

    That is Failed, Cancelled, settled (tuition paid), or passed but with the
    fee deadline missed and nothing paid.
    """
    if state.status in (PassStatus.FAILED, PassStatus.CANCELLED):
        return True
    if state.passed and state.tuition_paid:
        return True
    return state.passed and not state.fee_paid and today > state.school.fee_deadline


def has_higher_priority(roster: Roster, target: SchoolState) -> bool:
    return bool(roster.higher_priority_than(target))


def higher_priority_viable_exists(roster: Roster, target: SchoolState, today: int) -> bool:
    return any(is_viable(s, today) for s in roster.higher_priority_than(target))


def all_higher_gone(roster: Roster, target: SchoolState, today: int) -> bool:
    return all(is_gone(s, today) for s in roster.higher_priority_than(target))


def all_higher_rejected(roster: Roster, target: SchoolState) -> bool:
    """Every preferred school is Failed or Cancelled (vacuously true for the top choice)."""
    return all(s.status.is_terminal for s in roster.higher_priority_than(target))
