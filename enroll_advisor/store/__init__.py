"""In-memory roster store."""

from enroll_advisor.store.roster import Roster

__all__ = ["Roster"]
