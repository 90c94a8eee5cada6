"""Random data generators."""

from enroll_advisor.generators.roster import RosterGenerator

__all__ = ["RosterGenerator"]
