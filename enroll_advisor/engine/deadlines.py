"""Deadline enforcement: cancel a passed admission once a payment is missed."""

import logging

from enroll_advisor.models import PassStatus, SchoolState
from enroll_advisor.store import Roster

logger = logging.getLogger(__name__)


def update_status(state: SchoolState, today: int) -> SchoolState:
    """Apply the same-day deadline rule to one school.

    Only Passed can change, and only to Cancelled: when ``today`` is past
    the enrollment-fee deadline with the fee unpaid, or past the tuition
    deadline with tuition unpaid. On or before both deadlines the state is
    returned unchanged.
    """
    if state.status is not PassStatus.PASSED:
        return state

    school = state.school
    if today > school.fee_deadline and not state.fee_paid:
        logger.debug("%s cancelled: enrollment fee deadline %d missed", school.name, school.fee_deadline)
        return state.with_status(PassStatus.CANCELLED)
    if today > school.tuition_deadline and not state.tuition_paid:
        logger.debug("%s cancelled: tuition deadline %d missed", school.name, school.tuition_deadline)
        return state.with_status(PassStatus.CANCELLED)
    return state


def apply_deadlines(roster: Roster, today: int) -> Roster:
    """Return a new roster with the deadline rule applied to every school."""
    return roster.map(lambda state: update_status(state, today))
