"""Serialization of results into the camelCase wire shapes."""

from dataclasses import fields, is_dataclass
from datetime import date
from enum import Enum
from typing import Any

from enroll_advisor.models import (
    DailyRecommendation,
    PaymentAction,
    Recommendation,
    RecommendationResult,
    School,
    SchoolState,
    UpcomingAnnouncement,
    WeeklyRecommendations,
)
from enroll_advisor.store import Roster


def action_to_dict(action: PaymentAction) -> dict:
    data: dict[str, Any] = {"type": action.action_type.value}
    if action.school_id is not None:
        data["schoolId"] = action.school_id
    return data


def recommendation_to_dict(rec: Recommendation) -> dict:
    return {
        "action": action_to_dict(rec.action),
        "reason": rec.reason,
        "urgency": rec.urgency,
    }


def result_to_dict(result: RecommendationResult) -> dict:
    """``{action, reason, urgency, allRecommendations}``."""
    data = recommendation_to_dict(result.top)
    data["allRecommendations"] = [recommendation_to_dict(r) for r in result.all_recommendations]
    return data


def announcement_to_dict(announcement: UpcomingAnnouncement) -> dict:
    return {
        "schoolId": announcement.school_id,
        "schoolName": announcement.school_name,
        "resultDay": announcement.result_day,
    }


def weekly_to_dict(weekly: WeeklyRecommendations) -> dict:
    """``{startDay, recommendations: [{day, result}], upcomingAnnouncements, note}``."""
    return {
        "startDay": weekly.start_day,
        "recommendations": [daily_to_dict(d) for d in weekly.recommendations],
        "upcomingAnnouncements": [announcement_to_dict(a) for a in weekly.upcoming_announcements],
        "note": weekly.note,
    }


def daily_to_dict(daily: DailyRecommendation) -> dict:
    return {"day": daily.day, "result": result_to_dict(daily.result)}


def school_to_dict(school: School) -> dict:
    return {
        "id": school.school_id,
        "name": school.name,
        "priority": school.priority,
        "examDate": school.exam_day,
        "resultDate": school.result_day,
        "enrollmentFeeDeadline": school.fee_deadline,
        "tuitionDeadline": school.tuition_deadline,
        "enrollmentFee": school.enrollment_fee,
        "tuition": school.tuition,
    }


def state_to_dict(state: SchoolState) -> dict:
    return {
        "schoolId": state.school_id,
        "passStatus": state.status.value,
        "enrollmentFeePaid": state.fee_paid,
        "tuitionPaid": state.tuition_paid,
    }


def roster_to_payload(roster: Roster) -> dict:
    """Split a roster back into the ``{schools, states}`` request shapes."""
    return {
        "schools": [school_to_dict(s.school) for s in roster],
        "states": [state_to_dict(s) for s in roster],
    }


_CONVERTERS = {
    RecommendationResult: result_to_dict,
    WeeklyRecommendations: weekly_to_dict,
    DailyRecommendation: daily_to_dict,
    Recommendation: recommendation_to_dict,
    PaymentAction: action_to_dict,
    UpcomingAnnouncement: announcement_to_dict,
    School: school_to_dict,
    SchoolState: state_to_dict,
    Roster: roster_to_payload,
}


def to_wire(obj: Any) -> Any:
    """Convert a model (or a dict/list of them) to JSON-ready data."""
    converter = _CONVERTERS.get(type(obj))
    if converter is not None:
        return converter(obj)
    if is_dataclass(obj) and not isinstance(obj, type):
        return {f.name: to_wire(getattr(obj, f.name)) for f in fields(obj)}
    return serialize_value(obj)


def serialize_value(value: Any) -> Any:
    """Serialize a value for JSON output."""
    if isinstance(value, Enum):
        return value.value
    elif isinstance(value, date):
        return value.isoformat()
    elif isinstance(value, dict):
        return {k: to_wire(v) for k, v in value.items()}
    elif isinstance(value, (list, tuple)):
        return [to_wire(v) for v in value]
    return value
