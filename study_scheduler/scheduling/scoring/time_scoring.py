"""
Time-based scoring functions for slot evaluation.
"""

from ..core.time_slot import Slot
from ..core.constants import PREFERRED_HOUR_BONUS, IDEAL_DURATION_BONUS, IDEAL_DURATION_TOLERANCE


def calculate_time_preference_score(slot: Slot, config) -> int:
    """Bonus when the slot starts inside one of the configured peak hours."""
    start_hour = slot.start_minutes // 60
    if start_hour in config.preferred_hours:
        return PREFERRED_HOUR_BONUS
    return 0


def calculate_duration_fit_score(slot: Slot, config) -> int:
    """Bonus when the gap is within 15 minutes of the ideal block length."""
    if abs(slot.duration_minutes - config.ideal_block_minutes) < IDEAL_DURATION_TOLERANCE:
        return IDEAL_DURATION_BONUS
    return 0
