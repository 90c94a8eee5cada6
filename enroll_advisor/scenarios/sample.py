"""Built-in sample roster: a typical four-school application season.

Day 1 is February 1. The most preferred school announces last, so the
applicant has to hold fees for the safer schools while waiting on it.
"""

from __future__ import annotations

import copy

from enroll_advisor.api import EXPORT_VERSION

SAMPLE_DESCRIPTION = "Sample season: one national university and three private universities"

SAMPLE_SCHOOLS: list[dict] = [
    {
        "id": 1,
        "name": "Tokyo University, Science I",
        "priority": 1,
        "examDate": 25,               # Feb 25
        "resultDate": 38,             # Mar 10
        "enrollmentFeeDeadline": 43,  # Mar 15
        "tuitionDeadline": 59,        # Mar 31
        "enrollmentFee": 282000,
        "tuition": 535800,
        "passStatus": "notYetAnnounced",
        "enrollmentFeePaid": False,
        "tuitionPaid": False,
    },
    {
        "id": 2,
        "name": "Waseda University, Fundamental Science",
        "priority": 2,
        "examDate": 16,
        "resultDate": 27,
        "enrollmentFeeDeadline": 32,
        "tuitionDeadline": 52,
        "enrollmentFee": 200000,
        "tuition": 1447000,
        "passStatus": "notYetAnnounced",
        "enrollmentFeePaid": False,
        "tuitionPaid": False,
    },
    {
        "id": 3,
        "name": "Keio University, Science and Technology",
        "priority": 3,
        "examDate": 12,
        "resultDate": 24,
        "enrollmentFeeDeadline": 31,
        "tuitionDeadline": 52,
        "enrollmentFee": 200000,
        "tuition": 1480000,
        "passStatus": "notYetAnnounced",
        "enrollmentFeePaid": False,
        "tuitionPaid": False,
    },
    {
        "id": 4,
        "name": "Tokyo University of Science, Engineering",
        "priority": 4,
        "examDate": 8,
        "resultDate": 23,
        "enrollmentFeeDeadline": 28,
        "tuitionDeadline": 39,
        "enrollmentFee": 300000,
        "tuition": 1240000,
        "passStatus": "notYetAnnounced",
        "enrollmentFeePaid": False,
        "tuitionPaid": False,
    },
]


def sample_payload() -> dict:
    """Return the sample roster in the export format."""
    return {
        "version": EXPORT_VERSION,
        "description": SAMPLE_DESCRIPTION,
        "schools": copy.deepcopy(SAMPLE_SCHOOLS),
    }
