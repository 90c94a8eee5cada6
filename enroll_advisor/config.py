"""Configuration management for enroll-advisor."""

import os
from dataclasses import dataclass

from enroll_advisor.exceptions import ConfigurationError

DEFAULT_WINDOW_DAYS = 7
DEFAULT_MAX_WINDOW_DAYS = 366
DEFAULT_NO_ACTION_URGENCY = 999999

_LOG_FORMATS = ("standard", "json")


def _env_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


def _env_int(name: str, default: int | None) -> int | None:
    value = os.getenv(name)
    if value is None or value == "":
        return default
    try:
        return int(value)
    except ValueError as exc:
        raise ConfigurationError(f"{name} must be an integer, got {value!r}") from exc


@dataclass
class AdvisorConfig:
    """Main configuration for the payment advisor.

    ``max_window_days`` caps the length of a weekly projection.
    ``pay_top_choice_immediately`` selects how the most preferred school is
    treated once it has passed: ``False`` holds the enrollment fee until its
    deadline, ``True`` recommends paying as soon as the top choice is secured.
    """

    window_days: int = DEFAULT_WINDOW_DAYS
    max_window_days: int = DEFAULT_MAX_WINDOW_DAYS
    pay_top_choice_immediately: bool = False
    no_action_urgency: int = DEFAULT_NO_ACTION_URGENCY
    base_year: int | None = None
    log_level: str = "INFO"
    log_format: str = "standard"

    def __post_init__(self) -> None:
        if self.window_days < 1:
            raise ConfigurationError(f"window_days must be at least 1, got {self.window_days}")
        if self.window_days > self.max_window_days:
            raise ConfigurationError(
                f"window_days must not exceed max_window_days ({self.max_window_days}), "
                f"got {self.window_days}"
            )
        if self.no_action_urgency < 0:
            raise ConfigurationError(
                f"no_action_urgency must not be negative, got {self.no_action_urgency}"
            )
        if self.log_format not in _LOG_FORMATS:
            raise ConfigurationError(
                f"log_format must be one of {_LOG_FORMATS}, got {self.log_format!r}"
            )

    @classmethod
    def from_env(cls) -> "AdvisorConfig":
        """Create config from environment variables."""
        return cls(
            window_days=_env_int("ADVISOR_WINDOW_DAYS", DEFAULT_WINDOW_DAYS),
            max_window_days=_env_int("ADVISOR_MAX_WINDOW_DAYS", DEFAULT_MAX_WINDOW_DAYS),
            pay_top_choice_immediately=_env_bool("ADVISOR_PAY_TOP_CHOICE_IMMEDIATELY", False),
            no_action_urgency=_env_int("ADVISOR_NO_ACTION_URGENCY", DEFAULT_NO_ACTION_URGENCY),
            base_year=_env_int("ADVISOR_BASE_YEAR", None),
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            log_format=os.getenv("LOG_FORMAT", "standard"),
        )
