"""Built-in rosters."""

from enroll_advisor.scenarios.sample import SAMPLE_SCHOOLS, sample_payload

__all__ = ["SAMPLE_SCHOOLS", "sample_payload"]
