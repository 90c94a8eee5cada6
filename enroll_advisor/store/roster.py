"""Roster of school states with referential integrity."""

from dataclasses import dataclass, field
from typing import Callable, Iterator

from enroll_advisor.exceptions import ReferentialIntegrityError
from enroll_advisor.models import (
    ActionType,
    PassStatus,
    PaymentAction,
    PaymentStatus,
    SchoolState,
)


@dataclass(frozen=True)
class Roster:
    """Immutable, ordered collection of school states keyed by school id.

    Order is the caller's input order and is used for stable tie-breaking.
    Every "update" returns a new roster; the original is never mutated.
    """

    states: tuple[SchoolState, ...] = ()
    _index: dict[int, int] = field(default_factory=dict, init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        index: dict[int, int] = {}
        for position, state in enumerate(self.states):
            if state.school_id in index:
                raise ReferentialIntegrityError(
                    f"School id {state.school_id} appears more than once"
                )
            index[state.school_id] = position
        object.__setattr__(self, "_index", index)

    def __iter__(self) -> Iterator[SchoolState]:
        return iter(self.states)

    def __len__(self) -> int:
        return len(self.states)

    def __contains__(self, school_id: object) -> bool:
        return school_id in self._index

    def get(self, school_id: int) -> SchoolState:
        """Return the state for ``school_id``."""
        if school_id not in self._index:
            raise ReferentialIntegrityError(f"School {school_id} not found")
        return self.states[self._index[school_id]]

    def higher_priority_than(self, target: SchoolState) -> list[SchoolState]:
        """Return every school strictly preferred over ``target``."""
        return [s for s in self.states if s.school.outranks(target.school)]

    def map(self, fn: Callable[[SchoolState], SchoolState]) -> "Roster":
        """Return a new roster with ``fn`` applied to every state."""
        return Roster(tuple(fn(s) for s in self.states))

    def replace(self, state: SchoolState) -> "Roster":
        """Return a new roster with the state for ``state.school_id`` swapped in."""
        position = self._index.get(state.school_id)
        if position is None:
            raise ReferentialIntegrityError(f"School {state.school_id} not found")
        states = list(self.states)
        states[position] = state
        return Roster(tuple(states))

    def with_status(self, school_id: int, status: PassStatus) -> "Roster":
        """Return a new roster with one school's declared outcome changed."""
        return self.replace(self.get(school_id).with_status(status))

    def with_payment(
        self,
        school_id: int,
        enrollment_fee_paid: bool,
        tuition_paid: bool,
    ) -> "Roster":
        """Return a new roster with one school's payment flags changed."""
        current = self.get(school_id)
        payment = PaymentStatus(
            enrollment_fee_paid=enrollment_fee_paid,
            tuition_paid=tuition_paid,
            school_name=current.school.name,
        )
        return self.replace(SchoolState(school=current.school, status=current.status, payment=payment))

    def apply_action(self, action: PaymentAction) -> "Roster":
        """Return the roster as it would be after the caller performs ``action``."""
        if action.action_type is ActionType.DO_NOTHING:
            return self
        current = self.get(action.school_id)
        if action.action_type is ActionType.PAY_ENROLLMENT_FEE:
            return self.with_payment(current.school_id, True, current.tuition_paid)
        return self.with_payment(current.school_id, current.fee_paid, True)
