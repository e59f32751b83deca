"""
Transient slot types produced while placing learning blocks. Never persisted.
"""

from typing import Optional, Tuple
from .time_model import to_minutes


class Slot:
    """
    A free gap between two time-adjacent fixed activities of one day.
    Covers [start_time, end_time).
    """
    def __init__(self, start_time: str, end_time: str, duration_minutes: int,
                 preceding_activity_name: str = "", following_activity_name: str = ""):
        self.start_time = start_time
        self.end_time = end_time
        self.duration_minutes = duration_minutes
        self.preceding_activity_name = preceding_activity_name
        self.following_activity_name = following_activity_name

    @property
    def start_minutes(self) -> int:
        return to_minutes(self.start_time)

    @property
    def end_minutes(self) -> int:
        return to_minutes(self.end_time)

    def __lt__(self, other):
        return self.start_minutes < other.start_minutes

    def __eq__(self, other):
        if not isinstance(other, Slot):
            return NotImplemented
        return (self.start_time, self.end_time, self.preceding_activity_name, self.following_activity_name) == \
            (other.start_time, other.end_time, other.preceding_activity_name, other.following_activity_name)

    def __hash__(self):
        return hash((self.start_time, self.end_time, self.preceding_activity_name, self.following_activity_name))

    def __repr__(self):
        return (f"Slot({self.start_time} - {self.end_time}, {self.duration_minutes}min, "
                f"after={self.preceding_activity_name!r}, before={self.following_activity_name!r})")


class ScoredSlot(Slot):
    """A Slot with its 0-100 suitability for a learning block."""
    def __init__(self, slot: Slot, suitability: int, blocked_by_fixed: bool = False,
                 overlaps_flexible: bool = False, reason: Optional[str] = None,
                 overlapping_activities: Tuple = ()):
        super().__init__(
            slot.start_time,
            slot.end_time,
            slot.duration_minutes,
            slot.preceding_activity_name,
            slot.following_activity_name,
        )
        self.suitability = suitability
        self.blocked_by_fixed = blocked_by_fixed
        self.overlaps_flexible = overlaps_flexible
        self.reason = reason
        self.overlapping_activities = tuple(overlapping_activities)

    def is_eligible(self, config) -> bool:
        return self.suitability >= config.minimum_suitability_score

    def __repr__(self):
        reason = f", reason={self.reason!r}" if self.reason else ""
        return f"ScoredSlot({self.start_time} - {self.end_time}, score={self.suitability}{reason})"
