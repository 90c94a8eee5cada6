"""Recommendation and simulation result models."""

from dataclasses import dataclass, field

from enroll_advisor.models.enums import ActionType


@dataclass(frozen=True)
class PaymentAction:
    """A recommendable action; ``school_id`` is None only for DoNothing."""

    action_type: ActionType
    school_id: int | None = None

    @classmethod
    def pay_enrollment_fee(cls, school_id: int) -> "PaymentAction":
        return cls(ActionType.PAY_ENROLLMENT_FEE, school_id)

    @classmethod
    def pay_tuition(cls, school_id: int) -> "PaymentAction":
        return cls(ActionType.PAY_TUITION, school_id)

    @classmethod
    def do_nothing(cls) -> "PaymentAction":
        return cls(ActionType.DO_NOTHING)


@dataclass(frozen=True)
class Recommendation:
    """One actionable suggestion.

    ``urgency`` counts days until the relevant deadline; 0 means due today.
    """

    action: PaymentAction
    reason: str
    urgency: int

    def rebased(self, offset: int, sentinel: int) -> "Recommendation":
        """Shift urgency by ``offset`` days, leaving the DoNothing sentinel alone."""
        if self.action.action_type is ActionType.DO_NOTHING and self.urgency == sentinel:
            return self
        return Recommendation(action=self.action, reason=self.reason, urgency=self.urgency + offset)


@dataclass(frozen=True)
class RecommendationResult:
    """Top recommendation plus the full ranked list for one day."""

    top: Recommendation
    all_recommendations: list[Recommendation] = field(default_factory=list)

    @property
    def action(self) -> PaymentAction:
        return self.top.action

    @property
    def reason(self) -> str:
        return self.top.reason

    @property
    def urgency(self) -> int:
        return self.top.urgency


@dataclass(frozen=True)
class DailyRecommendation:
    day: int
    result: RecommendationResult


@dataclass(frozen=True)
class UpcomingAnnouncement:
    school_id: int
    school_name: str
    result_day: int


@dataclass(frozen=True)
class WeeklyRecommendations:
    """Day-by-day projection over a window starting at ``start_day``."""

    start_day: int
    recommendations: list[DailyRecommendation]
    upcoming_announcements: list[UpcomingAnnouncement]
    note: str | None = None
