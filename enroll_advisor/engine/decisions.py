"""Decision predicates: should a given school be paid today?

The ``can_pay_*`` predicates say whether a payment is possible at all; the
``should_pay_*`` predicates add the priority-ordered waiting rules on top
and never return True where the matching ``can_pay_*`` is False.
"""

import logging

from enroll_advisor.engine.viability import (
    all_higher_gone,
    all_higher_rejected,
    has_higher_priority,
    higher_priority_viable_exists,
)
from enroll_advisor.models import SchoolState
from enroll_advisor.store import Roster

logger = logging.getLogger(__name__)


def can_pay_enrollment_fee(state: SchoolState, today: int) -> bool:
    return state.passed and not state.fee_paid and today <= state.school.fee_deadline


def can_pay_tuition(state: SchoolState, today: int) -> bool:
    return (
        state.passed
        and state.fee_paid
        and not state.tuition_paid
        and today <= state.school.tuition_deadline
    )


def should_pay_enrollment_fee(
    roster: Roster,
    target: SchoolState,
    today: int,
    pay_top_choice_immediately: bool = False,
) -> bool:
    """Decide whether to pay ``target``'s enrollment fee today.

    Parameters
    ----------
    roster : Roster
        Deadline-enforced roster for ``today``.
    target : SchoolState
        School being considered.
    today : int
        Evaluation day.
    pay_top_choice_immediately : bool
        Policy for the most preferred school: pay once it has passed instead
        of holding the fee until its deadline.

    Returns
    -------
    bool
        False while a preferred school is still viable; True on the fee
        deadline or once every preferred school is out of the picture.
    """
    if not can_pay_enrollment_fee(target, today):
        return False
    if higher_priority_viable_exists(roster, target, today):
        logger.debug("%s: waiting, a preferred school is still viable", target.school.name)
        return False
    if today == target.school.fee_deadline:
        return True
    if not has_higher_priority(roster, target):
        return pay_top_choice_immediately
    if all_higher_gone(roster, target, today):
        return True
    logger.debug("%s: waiting on a preferred school's announcement", target.school.name)
    return False


def should_pay_tuition(roster: Roster, target: SchoolState, today: int) -> bool:
    """Decide whether to pay ``target``'s tuition today.

    Tuition commits the applicant, so it is held until the tuition deadline
    unless every preferred school has failed or been cancelled.
    """
    if not can_pay_tuition(target, today):
        return False
    if today == target.school.tuition_deadline:
        return True
    return all_higher_rejected(roster, target)
