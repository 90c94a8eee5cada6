"""Recommendation builder: turn positive decisions into a ranked list."""

from __future__ import annotations

import logging

from enroll_advisor.config import AdvisorConfig
from enroll_advisor.engine.deadlines import apply_deadlines
from enroll_advisor.engine.decisions import should_pay_enrollment_fee, should_pay_tuition
from enroll_advisor.engine.viability import has_higher_priority
from enroll_advisor.models import (
    PaymentAction,
    Recommendation,
    RecommendationResult,
    SchoolState,
)
from enroll_advisor.store import Roster

logger = logging.getLogger(__name__)

NO_ACTION_REASON = "No payment is needed today."


def _reason(roster: Roster, state: SchoolState, today: int, deadline: int, what: str) -> str:
    school = state.school
    amount = school.enrollment_fee if what == "enrollment fee" else school.tuition
    if today == deadline:
        why = f"the {what} deadline is today"
    elif not has_higher_priority(roster, state):
        why = "your top choice is secured"
    else:
        why = "all higher-priority schools are resolved"
    return f"Pay the {what} ({amount}) for {school.name}: {why}."


def recommend_for_school(
    roster: Roster,
    state: SchoolState,
    today: int,
    config: AdvisorConfig,
) -> Recommendation | None:
    """Build the recommendation for one school, or None when nothing is due.

    The enrollment fee is considered before tuition, and tuition is only
    possible once the fee is paid, so a school never yields both.
    """
    school = state.school
    if should_pay_enrollment_fee(roster, state, today, config.pay_top_choice_immediately):
        return Recommendation(
            action=PaymentAction.pay_enrollment_fee(school.school_id),
            reason=_reason(roster, state, today, school.fee_deadline, "enrollment fee"),
            urgency=max(0, school.fee_deadline - today),
        )
    if should_pay_tuition(roster, state, today):
        return Recommendation(
            action=PaymentAction.pay_tuition(school.school_id),
            reason=_reason(roster, state, today, school.tuition_deadline, "tuition"),
            urgency=max(0, school.tuition_deadline - today),
        )
    return None


def no_action(config: AdvisorConfig) -> Recommendation:
    return Recommendation(
        action=PaymentAction.do_nothing(),
        reason=NO_ACTION_REASON,
        urgency=config.no_action_urgency,
    )


def rank_recommendations(roster: Roster, today: int, config: AdvisorConfig) -> list[Recommendation]:
    """Collect every school's recommendation, most urgent first.

    ``sorted`` is stable, so equal urgencies keep roster order.
    """
    found = []
    for state in roster:
        recommendation = recommend_for_school(roster, state, today, config)
        if recommendation is not None:
            found.append(recommendation)
    return sorted(found, key=lambda r: r.urgency)


def recommend(
    roster: Roster,
    today: int,
    config: AdvisorConfig | None = None,
) -> RecommendationResult:
    """Produce the top recommendation and ranked list for ``today``.

    Deadlines are enforced first, so every decision sees the post-deadline
    state. The input roster is not modified.
    """
    config = config or AdvisorConfig()
    enforced = apply_deadlines(roster, today)
    ranked = rank_recommendations(enforced, today, config)
    top = ranked[0] if ranked else no_action(config)
    logger.debug(
        "Day %d: %d recommendation(s), top=%s",
        today,
        len(ranked),
        top.action.action_type.value,
    )
    return RecommendationResult(top=top, all_recommendations=ranked)
