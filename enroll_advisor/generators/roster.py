"""Random roster generator for simulations and randomized tests."""

from __future__ import annotations

import random
from typing import Iterator

from enroll_advisor.generators.base import BaseGenerator
from enroll_advisor.models import PassStatus, PaymentStatus, School, SchoolState
from enroll_advisor.sinks.serialization import roster_to_payload
from enroll_advisor.store import Roster


class RosterGenerator(BaseGenerator):
    """Generate valid school rosters with states consistent with a given day.

    Every generated ``School`` satisfies the entity invariants, and every
    state satisfies the timing rule for the evaluation day: schools whose
    result day is still ahead are NotAnnounced, the rest have an outcome.
    """

    SCHOOL_KINDS = ["University", "College", "Institute of Technology", "Women's University"]

    ANNOUNCED_STATUSES = [PassStatus.PASSED, PassStatus.FAILED, PassStatus.CANCELLED]
    ANNOUNCED_WEIGHTS = [0.60, 0.25, 0.15]

    # Amounts in the smallest currency unit
    FEE_RANGE = (50000, 400000)
    TUITION_EXTRA_RANGE = (1, 1500000)

    def generate_school(self, school_id: int, priority: int, season_start: int = 1) -> School:
        """Generate a single school with ordered dates and fee < tuition.

        Parameters
        ----------
        school_id : int
            Identifier for the school.
        priority : int
            Preference rank (1 = most preferred).
        season_start : int
            Earliest possible exam day.

        Returns
        -------
        School
            Generated school.
        """
        exam_day = season_start + random.randint(0, 20)
        result_day = exam_day + random.randint(0, 14)
        fee_deadline = result_day + random.randint(0, 10)
        tuition_deadline = fee_deadline + random.randint(0, 20)
        enrollment_fee = random.randint(*self.FEE_RANGE)
        tuition = enrollment_fee + random.randint(*self.TUITION_EXTRA_RANGE)
        name = f"{self.fake.last_name()} {random.choice(self.SCHOOL_KINDS)}"

        return School(
            school_id=school_id,
            name=name,
            priority=priority,
            exam_day=exam_day,
            result_day=result_day,
            fee_deadline=fee_deadline,
            tuition_deadline=tuition_deadline,
            enrollment_fee=enrollment_fee,
            tuition=tuition,
        )

    def generate_state(self, school: School, today: int) -> SchoolState:
        """Generate a state for ``school`` that is valid at ``today``."""
        if today < school.result_day:
            return SchoolState(school=school)

        status = random.choices(self.ANNOUNCED_STATUSES, weights=self.ANNOUNCED_WEIGHTS, k=1)[0]
        fee_paid = False
        tuition_paid = False
        if status in (PassStatus.PASSED, PassStatus.CANCELLED):
            fee_paid = random.random() < 0.4
            tuition_paid = fee_paid and random.random() < 0.3

        return SchoolState(
            school=school,
            status=status,
            payment=PaymentStatus(
                enrollment_fee_paid=fee_paid,
                tuition_paid=tuition_paid,
                school_name=school.name,
            ),
        )

    def generate(self, num_schools: int, today: int, season_start: int = 1) -> Roster:
        """Generate a roster of ``num_schools`` schools evaluated at ``today``.

        Priorities are a shuffled ``1..num_schools`` so roster order and
        preference order differ.
        """
        priorities = list(range(1, num_schools + 1))
        random.shuffle(priorities)
        states = []
        for school_id, priority in enumerate(priorities, start=1):
            school = self.generate_school(school_id, priority, season_start)
            states.append(self.generate_state(school, today))
        return Roster(tuple(states))

    def generate_batch(self, count: int, num_schools: int, today: int) -> Iterator[Roster]:
        """Generate ``count`` rosters evaluated at ``today``.

        Yields
        ------
        Roster
            Generated rosters.
        """
        for _ in range(count):
            yield self.generate(num_schools, today)

    def generate_payload(self, num_schools: int, today: int) -> dict:
        """Generate a roster as raw ``{schools, states}`` request records."""
        return roster_to_payload(self.generate(num_schools, today))
