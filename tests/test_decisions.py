"""Tests for the decision predicates."""

import pytest

from enroll_advisor.engine.decisions import (
    can_pay_enrollment_fee,
    can_pay_tuition,
    should_pay_enrollment_fee,
    should_pay_tuition,
)
from enroll_advisor.models import PassStatus
from tests.factories import make_school, make_state, roster


class TestCanPay:
    def test_can_pay_fee(self) -> None:
        school = make_school(fee_deadline=15)

        assert can_pay_enrollment_fee(make_state(school), 15)
        assert not can_pay_enrollment_fee(make_state(school), 16)
        assert not can_pay_enrollment_fee(make_state(school, fee_paid=True), 12)
        assert not can_pay_enrollment_fee(make_state(school, PassStatus.NOT_ANNOUNCED), 5)

    def test_can_pay_tuition(self) -> None:
        school = make_school(tuition_deadline=30)

        assert can_pay_tuition(make_state(school, fee_paid=True), 30)
        assert not can_pay_tuition(make_state(school), 20)
        assert not can_pay_tuition(make_state(school, fee_paid=True), 31)
        assert not can_pay_tuition(make_state(school, fee_paid=True, tuition_paid=True), 20)
        assert not can_pay_tuition(make_state(school, PassStatus.CANCELLED, fee_paid=True), 20)


class TestShouldPayEnrollmentFee:
    """Priority-ordered rules for the enrollment fee."""

    def test_not_payable(self) -> None:
        target = make_state(make_school(1), PassStatus.FAILED)

        assert not should_pay_enrollment_fee(roster(target), target, 12)

    def test_higher_viable_blocks_even_on_deadline(self) -> None:
        top = make_state(make_school(1, fee_deadline=20))
        target = make_state(make_school(2, fee_deadline=15))

        assert not should_pay_enrollment_fee(roster(top, target), target, 15)

    def test_deadline_day_forces_payment(self) -> None:
        pending = make_state(make_school(1, result_day=18, fee_deadline=20), PassStatus.NOT_ANNOUNCED)
        target = make_state(make_school(2, fee_deadline=15))

        assert should_pay_enrollment_fee(roster(pending, target), target, 15)

    def test_top_choice_waits_until_deadline(self) -> None:
        target = make_state(make_school(1, fee_deadline=15))

        assert not should_pay_enrollment_fee(roster(target), target, 12)
        assert should_pay_enrollment_fee(roster(target), target, 15)

    def test_top_choice_immediate_policy(self) -> None:
        target = make_state(make_school(1, fee_deadline=15))

        assert should_pay_enrollment_fee(roster(target), target, 12, pay_top_choice_immediately=True)

    def test_all_higher_gone(self) -> None:
        failed = make_state(make_school(1), PassStatus.FAILED)
        target = make_state(make_school(2, fee_deadline=17))

        assert should_pay_enrollment_fee(roster(failed, target), target, 12)

    def test_waits_on_pending_announcement(self) -> None:
        pending = make_state(make_school(1, result_day=18, fee_deadline=20), PassStatus.NOT_ANNOUNCED)
        target = make_state(make_school(2, fee_deadline=15))

        assert not should_pay_enrollment_fee(roster(pending, target), target, 12)

    def test_immediate_policy_does_not_skip_pending_higher(self) -> None:
        pending = make_state(make_school(1, result_day=18, fee_deadline=20), PassStatus.NOT_ANNOUNCED)
        target = make_state(make_school(2, fee_deadline=15))

        assert not should_pay_enrollment_fee(
            roster(pending, target), target, 12, pay_top_choice_immediately=True
        )


class TestShouldPayTuition:
    """Tuition is held until the deadline or until all preferred schools are rejected."""

    def test_requires_fee_paid(self) -> None:
        target = make_state(make_school(1, tuition_deadline=30))

        assert not should_pay_tuition(roster(target), target, 30)

    def test_deadline_day(self) -> None:
        pending = make_state(
            make_school(1, result_day=40, fee_deadline=40, tuition_deadline=50),
            PassStatus.NOT_ANNOUNCED,
        )
        target = make_state(make_school(2, tuition_deadline=30), fee_paid=True)

        assert not should_pay_tuition(roster(pending, target), target, 29)
        assert should_pay_tuition(roster(pending, target), target, 30)

    def test_all_higher_rejected(self) -> None:
        failed = make_state(make_school(1), PassStatus.FAILED)
        cancelled = make_state(make_school(2), PassStatus.CANCELLED)
        target = make_state(make_school(3, tuition_deadline=30), fee_paid=True)

        assert should_pay_tuition(roster(failed, cancelled, target), target, 20)

    def test_viable_higher_holds_tuition(self) -> None:
        top = make_state(make_school(1, fee_deadline=25, tuition_deadline=40))
        target = make_state(make_school(2, tuition_deadline=30), fee_paid=True)

        assert not should_pay_tuition(roster(top, target), target, 20)

    def test_top_choice_pays_once_fee_paid(self) -> None:
        target = make_state(make_school(1, tuition_deadline=30), fee_paid=True)

        assert should_pay_tuition(roster(target), target, 20)

    @pytest.mark.parametrize("today", [10, 20, 30])
    def test_tuition_implies_fee_paid(self, today: int) -> None:
        target = make_state(make_school(1, tuition_deadline=30))

        assert not should_pay_tuition(roster(target), target, today)
