"""Domain models for the payment advisor."""

from enroll_advisor.models.enums import ActionType, PassStatus
from enroll_advisor.models.recommendation import (
    DailyRecommendation,
    PaymentAction,
    Recommendation,
    RecommendationResult,
    UpcomingAnnouncement,
    WeeklyRecommendations,
)
from enroll_advisor.models.school import PaymentStatus, School, SchoolState

__all__ = [
    "ActionType",
    "DailyRecommendation",
    "PassStatus",
    "PaymentAction",
    "PaymentStatus",
    "Recommendation",
    "RecommendationResult",
    "School",
    "SchoolState",
    "UpcomingAnnouncement",
    "WeeklyRecommendations",
]
