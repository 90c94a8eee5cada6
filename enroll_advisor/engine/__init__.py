"""Decision engine: validation, deadline enforcement, decisions and projection."""

from enroll_advisor.engine.deadlines import apply_deadlines, update_status
from enroll_advisor.engine.decisions import (
    can_pay_enrollment_fee,
    can_pay_tuition,
    should_pay_enrollment_fee,
    should_pay_tuition,
)
from enroll_advisor.engine.recommend import rank_recommendations, recommend
from enroll_advisor.engine.validator import build_roster
from enroll_advisor.engine.viability import (
    all_higher_gone,
    higher_priority_viable_exists,
    is_viable,
)
from enroll_advisor.engine.weekly import simulate_week

__all__ = [
    "all_higher_gone",
    "apply_deadlines",
    "build_roster",
    "can_pay_enrollment_fee",
    "can_pay_tuition",
    "higher_priority_viable_exists",
    "is_viable",
    "rank_recommendations",
    "recommend",
    "should_pay_enrollment_fee",
    "should_pay_tuition",
    "simulate_week",
    "update_status",
]
