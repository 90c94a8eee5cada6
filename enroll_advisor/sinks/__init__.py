"""Output sinks for advisor results."""

from enroll_advisor.sinks.console import ConsoleSink
from enroll_advisor.sinks.json_file import JsonFileSink

__all__ = ["ConsoleSink", "JsonFileSink"]
