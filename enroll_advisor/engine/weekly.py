"""Weekly simulator: project recommendations over a window of days."""

from __future__ import annotations

import logging

from enroll_advisor.config import AdvisorConfig
from enroll_advisor.engine.recommend import recommend
from enroll_advisor.exceptions import ValidationError
from enroll_advisor.models import (
    DailyRecommendation,
    PassStatus,
    RecommendationResult,
    UpcomingAnnouncement,
    WeeklyRecommendations,
)
from enroll_advisor.store import Roster

logger = logging.getLogger(__name__)


def _rebase(result: RecommendationResult, offset: int, sentinel: int) -> RecommendationResult:
    return RecommendationResult(
        top=result.top.rebased(offset, sentinel),
        all_recommendations=[r.rebased(offset, sentinel) for r in result.all_recommendations],
    )


def upcoming_announcements(roster: Roster, start_day: int, days: int) -> list[UpcomingAnnouncement]:
    """Schools still awaiting results whose result day falls inside the window."""
    last_day = start_day + days - 1
    found = [
        UpcomingAnnouncement(
            school_id=s.school_id,
            school_name=s.school.name,
            result_day=s.school.result_day,
        )
        for s in roster
        if s.status is PassStatus.NOT_ANNOUNCED and start_day <= s.school.result_day <= last_day
    ]
    return sorted(found, key=lambda a: a.result_day)


def announcement_note(announcements: list[UpcomingAnnouncement]) -> str | None:
    if not announcements:
        return None
    names = ", ".join(a.school_name for a in announcements)
    return (
        f"Results for {names} will be announced during this period. "
        "Recommendations may change once those results are declared."
    )


def simulate_week(
    roster: Roster,
    start_day: int,
    days: int | None = None,
    config: AdvisorConfig | None = None,
) -> WeeklyRecommendations:
    """Recommend an action for each day in ``[start_day, start_day + days)``.

    Every day is evaluated from the same declared roster: no payment from an
    earlier simulated day is assumed to have happened. Urgencies are
    expressed relative to ``start_day``.

    Parameters
    ----------
    roster : Roster
        Validated roster (not modified).
    start_day : int
        First day of the window.
    days : int | None
        Window length; defaults to ``config.window_days`` and may not
        exceed ``config.max_window_days``.
    config : AdvisorConfig | None
        Engine configuration.

    Returns
    -------
    WeeklyRecommendations
        Per-day results plus announcements expected inside the window.
    """
    config = config or AdvisorConfig()
    if days is None:
        days = config.window_days
    if days < 1:
        raise ValidationError(None, "window length must be at least 1", f"days={days}")
    if days > config.max_window_days:
        raise ValidationError(
            None,
            f"window length must not exceed {config.max_window_days} days",
            f"days={days}",
        )

    daily = []
    for offset in range(days):
        day = start_day + offset
        result = recommend(roster, day, config)
        daily.append(
            DailyRecommendation(day=day, result=_rebase(result, offset, config.no_action_urgency))
        )

    announcements = upcoming_announcements(roster, start_day, days)
    logger.debug(
        "Simulated %d day(s) from %d; %d announcement(s) upcoming",
        days,
        start_day,
        len(announcements),
    )
    return WeeklyRecommendations(
        start_day=start_day,
        recommendations=daily,
        upcoming_announcements=announcements,
        note=announcement_note(announcements),
    )
