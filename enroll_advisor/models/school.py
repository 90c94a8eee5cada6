"""School and per-school state models.

``School`` and ``PaymentStatus`` check their invariants on construction, so
an instance that exists is always valid. Checks run in a fixed order and
the first violated constraint is reported.
"""

from dataclasses import dataclass, field

from enroll_advisor.exceptions import InvariantViolationError
from enroll_advisor.models.enums import PassStatus


@dataclass(frozen=True)
class School:
    """Static admission terms for one school.

    Days are comparable integers (a running day count or YYYYMMDD);
    amounts are in the smallest currency unit.
    """

    school_id: int
    name: str
    priority: int  # 1 = most preferred
    exam_day: int
    result_day: int
    fee_deadline: int
    tuition_deadline: int
    enrollment_fee: int
    tuition: int

    def __post_init__(self) -> None:
        violation = self._first_violation()
        if violation is not None:
            raise InvariantViolationError(self.name, violation)

    def _first_violation(self) -> str | None:
        if self.priority <= 0:
            return "priority must be positive"
        if self.enrollment_fee <= 0:
            return "enrollment fee must be positive"
        if self.tuition <= 0:
            return "tuition must be positive"
        if self.tuition <= self.enrollment_fee:
            return "tuition must be greater than enrollment fee"
        if self.result_day < self.exam_day:
            return "result day must not be before exam day"
        if self.fee_deadline < self.result_day:
            return "enrollment fee deadline must not be before result day"
        if self.tuition_deadline < self.fee_deadline:
            return "tuition deadline must not be before enrollment fee deadline"
        return None

    def outranks(self, other: "School") -> bool:
        """Return True when this school is strictly preferred over ``other``."""
        return self.priority < other.priority


@dataclass(frozen=True)
class PaymentStatus:
    """What has been paid to one school."""

    enrollment_fee_paid: bool = False
    tuition_paid: bool = False
    school_name: str | None = field(default=None, compare=False, repr=False)

    def __post_init__(self) -> None:
        if self.tuition_paid and not self.enrollment_fee_paid:
            raise InvariantViolationError(
                self.school_name, "tuition cannot be paid before the enrollment fee"
            )

    @property
    def settled(self) -> bool:
        return self.enrollment_fee_paid and self.tuition_paid


@dataclass(frozen=True)
class SchoolState:
    """One school's current situation: terms, outcome and payments."""

    school: School
    status: PassStatus = PassStatus.NOT_ANNOUNCED
    payment: PaymentStatus = field(default_factory=PaymentStatus)

    @property
    def school_id(self) -> int:
        return self.school.school_id

    @property
    def fee_paid(self) -> bool:
        return self.payment.enrollment_fee_paid

    @property
    def tuition_paid(self) -> bool:
        return self.payment.tuition_paid

    @property
    def passed(self) -> bool:
        return self.status is PassStatus.PASSED

    def with_status(self, status: PassStatus) -> "SchoolState":
        """Return a copy with a different pass status."""
        return SchoolState(school=self.school, status=status, payment=self.payment)
