"""Enumeration types for admission and payment entities."""

from enum import Enum


class PassStatus(str, Enum):
    NOT_ANNOUNCED = "notYetAnnounced"
    PASSED = "passed"
    FAILED = "failed"
    CANCELLED = "cancelled"

    @property
    def is_terminal(self) -> bool:
        """Failed and Cancelled never revert."""
        return self in (PassStatus.FAILED, PassStatus.CANCELLED)


class ActionType(str, Enum):
    PAY_ENROLLMENT_FEE = "payEnrollmentFee"
    PAY_TUITION = "payTuition"
    DO_NOTHING = "doNothing"
