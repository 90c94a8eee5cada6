"""Entry points of the advisor over raw (unvalidated) payloads.

``get_recommendation`` and ``get_weekly_recommendations`` validate the raw
records, run the engine and return result models; serialize them with
``enroll_advisor.sinks.serialization.to_wire`` for the wire shapes.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Mapping, Sequence

from enroll_advisor.config import AdvisorConfig
from enroll_advisor.engine import build_roster, recommend, simulate_week
from enroll_advisor.exceptions import MalformedRecordError
from enroll_advisor.models import RecommendationResult, WeeklyRecommendations

logger = logging.getLogger(__name__)

STATE_FIELDS = ("passStatus", "enrollmentFeePaid", "tuitionPaid")
EXPORT_VERSION = 1


def get_recommendation(
    today: int,
    schools: Sequence[Mapping[str, Any]],
    states: Sequence[Mapping[str, Any]] | None = None,
    config: AdvisorConfig | None = None,
) -> RecommendationResult:
    """Recommend the single payment action for ``today``.

    Raises
    ------
    ValidationError
        Any invalid school or state record; nothing is evaluated.
    ReferentialIntegrityError
        Duplicate or unknown school ids.
    """
    roster = build_roster(schools, states, today)
    result = recommend(roster, today, config)
    logger.info(
        "Recommendation for day %d: %s (urgency %d, %d candidate(s))",
        today,
        result.action.action_type.value,
        result.urgency,
        len(result.all_recommendations),
    )
    return result


def get_weekly_recommendations(
    start_day: int,
    schools: Sequence[Mapping[str, Any]],
    states: Sequence[Mapping[str, Any]] | None = None,
    days: int | None = None,
    config: AdvisorConfig | None = None,
) -> WeeklyRecommendations:
    """Project recommendations over ``days`` days starting at ``start_day``.

    The roster is validated against ``start_day``.
    """
    roster = build_roster(schools, states, start_day)
    weekly = simulate_week(roster, start_day, days, config)
    logger.info(
        "Weekly projection from day %d: %d day(s), %d upcoming announcement(s)",
        start_day,
        len(weekly.recommendations),
        len(weekly.upcoming_announcements),
    )
    return weekly


def split_export(data: Mapping[str, Any]) -> tuple[list[dict], list[dict]]:
    """Split the export format into ``(schools, states)`` request lists.

    The export format is ``{"version": 1, "schools": [...]}`` where each
    record holds both the school terms and its state fields.
    """
    if not isinstance(data, Mapping) or not isinstance(data.get("schools"), list):
        raise MalformedRecordError(None, "roster must be an object with a 'schools' list")
    version = data.get("version", EXPORT_VERSION)
    if version != EXPORT_VERSION:
        raise MalformedRecordError(None, "unsupported roster version", repr(version))

    schools: list[dict] = []
    states: list[dict] = []
    for record in data["schools"]:
        if not isinstance(record, Mapping):
            raise MalformedRecordError(None, "school record must be an object")
        school = {k: v for k, v in record.items() if k not in STATE_FIELDS}
        schools.append(school)
        if any(k in record for k in STATE_FIELDS):
            state = {k: record[k] for k in STATE_FIELDS if k in record}
            state["schoolId"] = record.get("id")
            states.append(state)
    return schools, states


def load_roster_file(path: str | Path) -> tuple[list[dict], list[dict]]:
    """Read an export-format roster file into ``(schools, states)``."""
    with open(path, encoding="utf-8") as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as exc:
            raise MalformedRecordError(None, "roster file is not valid JSON", str(exc)) from exc
    return split_export(data)
