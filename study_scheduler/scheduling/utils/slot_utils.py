"""
Slot discovery and interval queries over one day's activities.
"""

from typing import List, Sequence, Tuple
from study_scheduler.schemas import Activity
from ..core.constants import MINUTES_PER_DAY
from ..core.time_model import to_minutes, minutes_to_time_str
from ..core.time_slot import Slot
from ..constraints.activity_constraints import is_fixed_activity, may_wrap_midnight


def sort_by_start(activities: Sequence[Activity]) -> List[Activity]:
    """Stable sort by start time; equal starts keep their given order."""
    return sorted(activities, key=lambda activity: to_minutes(activity.start_time))


def activity_intervals(activity: Activity) -> List[Tuple[int, int]]:
    """Half-open minute intervals covered by an activity within its day."""
    start = to_minutes(activity.start_time)
    end = to_minutes(activity.end_time)
    if end <= start and may_wrap_midnight(activity):
        # Overnight sleep covers the evening tail and the morning head
        return [(start, MINUTES_PER_DAY), (0, end)]
    return [(start, end)]


def find_available_slots(day_activities: Sequence[Activity]) -> List[Slot]:
    """
    Gaps between consecutive fixed activities, in time order.
    Time before the first and after the last fixed activity is never offered.
    """
    fixed_activities = [activity for activity in sort_by_start(day_activities) if is_fixed_activity(activity)]
    slots = []

    for current, following in zip(fixed_activities, fixed_activities[1:]):
        current_end = to_minutes(current.end_time)
        following_start = to_minutes(following.start_time)

        if following_start > current_end:
            slots.append(Slot(
                start_time=minutes_to_time_str(current_end),
                end_time=minutes_to_time_str(following_start),
                duration_minutes=following_start - current_end,
                preceding_activity_name=current.name,
                following_activity_name=following.name,
            ))

    return slots


def find_overlapping_activities(slot: Slot, day_activities: Sequence[Activity]) -> List[Activity]:
    """Activities whose [start, end) intersects the slot's [start, end)."""
    slot_start = slot.start_minutes
    slot_end = slot.end_minutes
    overlapping = []

    for activity in day_activities:
        for start, end in activity_intervals(activity):
            if start < slot_end and end > slot_start:
                overlapping.append(activity)
                break

    return overlapping
