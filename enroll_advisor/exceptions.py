"""Custom exception hierarchy for enroll-advisor."""


class AdvisorError(Exception):
    """Base exception for all enroll-advisor errors."""


class ValidationError(AdvisorError):
    """Raised when a school or state record violates a constraint.

    Parameters
    ----------
    school_name : str | None
        Name of the offending school, when known.
    constraint : str
        Short name of the violated constraint.
    detail : str | None
        Optional extra context appended to the message.
    """

    def __init__(self, school_name: str | None, constraint: str, detail: str | None = None) -> None:
        self.school_name = school_name
        self.constraint = constraint
        self.detail = detail
        super().__init__(self._format())

    def _format(self) -> str:
        subject = f"School '{self.school_name}'" if self.school_name is not None else "Input"
        message = f"{subject}: {self.constraint}"
        if self.detail:
            message = f"{message} ({self.detail})"
        return message


class InvariantViolationError(ValidationError):
    """Raised when an entity invariant (amounts, date order, payments) is violated."""


class TimingConsistencyError(ValidationError):
    """Raised when a declared outcome does not match the evaluation day."""


class MalformedRecordError(ValidationError):
    """Raised when a raw record is missing a field or has the wrong type."""


class ReferentialIntegrityError(AdvisorError):
    """Raised when a school id reference is duplicated or unknown."""


class ConfigurationError(AdvisorError):
    """Raised when configuration is invalid or missing."""


class RpcError(AdvisorError):
    """Raised when a JSON-RPC request cannot be handled."""

    def __init__(self, code: int, message: str) -> None:
        self.code = code
        super().__init__(message)
