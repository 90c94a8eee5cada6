"""Input validation: raw school/state records into a validated roster.

Raw records use the camelCase wire shapes::

    school: {id, name, priority, examDate, resultDate,
             enrollmentFeeDeadline, tuitionDeadline, enrollmentFee, tuition}
    state:  {schoolId, passStatus, enrollmentFeePaid, tuitionPaid}

A single invalid record aborts the whole roster.
"""

from __future__ import annotations

import logging
from typing import Any, Iterable, Mapping

from enroll_advisor.exceptions import (
    MalformedRecordError,
    ReferentialIntegrityError,
    TimingConsistencyError,
)
from enroll_advisor.models import PassStatus, PaymentStatus, School, SchoolState
from enroll_advisor.store import Roster

logger = logging.getLogger(__name__)

# wire field -> School attribute, in validation order of the numeric fields
SCHOOL_FIELDS: dict[str, str] = {
    "id": "school_id",
    "priority": "priority",
    "examDate": "exam_day",
    "resultDate": "result_day",
    "enrollmentFeeDeadline": "fee_deadline",
    "tuitionDeadline": "tuition_deadline",
    "enrollmentFee": "enrollment_fee",
    "tuition": "tuition",
}


def _require_int(record: Mapping[str, Any], key: str, school_name: str | None) -> int:
    if key not in record or record[key] is None:
        raise MalformedRecordError(school_name, f"missing field '{key}'")
    value = record[key]
    # bool is an int subclass; true/false is never a valid day or amount
    if isinstance(value, bool) or not isinstance(value, int):
        raise MalformedRecordError(school_name, f"field '{key}' must be an integer", repr(value))
    return value


def _optional_bool(record: Mapping[str, Any], key: str, school_name: str | None) -> bool:
    value = record.get(key, False)
    if value is None:
        return False
    if not isinstance(value, bool):
        raise MalformedRecordError(school_name, f"field '{key}' must be a boolean", repr(value))
    return value


def parse_pass_status(label: Any, school_name: str | None = None) -> PassStatus:
    """Convert a wire status label into a ``PassStatus``."""
    try:
        return PassStatus(label)
    except ValueError:
        raise MalformedRecordError(school_name, "unknown pass status", repr(label)) from None


def parse_school(record: Mapping[str, Any]) -> School:
    """Build a ``School`` from a raw record.

    Raises
    ------
    MalformedRecordError
        A field is missing or has the wrong type.
    InvariantViolationError
        The first violated school invariant.
    """
    if not isinstance(record, Mapping):
        raise MalformedRecordError(None, "school record must be an object")
    name = record.get("name")
    if not isinstance(name, str) or not name:
        raise MalformedRecordError(None, "school name must be a non-empty string", repr(name))

    values = {attr: _require_int(record, key, name) for key, attr in SCHOOL_FIELDS.items()}
    return School(name=name, **values)


def parse_state(record: Mapping[str, Any], school: School) -> SchoolState:
    """Build a ``SchoolState`` for ``school`` from a raw state record."""
    status = parse_pass_status(
        record.get("passStatus", PassStatus.NOT_ANNOUNCED.value), school.name
    )
    payment = PaymentStatus(
        enrollment_fee_paid=_optional_bool(record, "enrollmentFeePaid", school.name),
        tuition_paid=_optional_bool(record, "tuitionPaid", school.name),
        school_name=school.name,
    )
    return SchoolState(school=school, status=status, payment=payment)


def check_timing(state: SchoolState, today: int) -> None:
    """Cross-check a declared outcome against the result day.

    Raises
    ------
    TimingConsistencyError
        Passed/Failed before the result day, or NotAnnounced on or after it.
    """
    school = state.school
    if state.status in (PassStatus.PASSED, PassStatus.FAILED) and today < school.result_day:
        raise TimingConsistencyError(
            school.name,
            "outcome declared before result day",
            f"status={state.status.value}, today={today}, resultDay={school.result_day}",
        )
    if state.status is PassStatus.NOT_ANNOUNCED and today >= school.result_day:
        raise TimingConsistencyError(
            school.name,
            "outcome missing on or after result day",
            f"today={today}, resultDay={school.result_day}",
        )


def build_roster(
    schools: Iterable[Mapping[str, Any]],
    states: Iterable[Mapping[str, Any]] | None,
    today: int,
) -> Roster:
    """Validate raw records into a ``Roster`` evaluated at ``today``.

    Schools without a state record default to NotAnnounced with nothing
    paid. Output order follows ``schools``.

    Raises
    ------
    ValidationError
        Any malformed, invariant-violating or stale record.
    ReferentialIntegrityError
        Duplicate school ids, or a state for an unknown or repeated school.
    """
    if isinstance(today, bool) or not isinstance(today, int):
        raise MalformedRecordError(None, "evaluation day must be an integer", repr(today))

    parsed: list[School] = [parse_school(record) for record in schools]
    by_id: dict[int, School] = {}
    for school in parsed:
        if school.school_id in by_id:
            raise ReferentialIntegrityError(f"School id {school.school_id} appears more than once")
        by_id[school.school_id] = school

    state_records: dict[int, Mapping[str, Any]] = {}
    for record in states or []:
        if not isinstance(record, Mapping):
            raise MalformedRecordError(None, "state record must be an object")
        school_id = _require_int(record, "schoolId", None)
        if school_id not in by_id:
            raise ReferentialIntegrityError(f"State refers to unknown school {school_id}")
        if school_id in state_records:
            raise ReferentialIntegrityError(f"School {school_id} has more than one state record")
        state_records[school_id] = record

    result: list[SchoolState] = []
    for school in parsed:
        record = state_records.get(school.school_id)
        state = parse_state(record, school) if record is not None else SchoolState(school=school)
        check_timing(state, today)
        result.append(state)

    logger.debug("Validated roster of %d schools at day %d", len(result), today)
    return Roster(tuple(result))
