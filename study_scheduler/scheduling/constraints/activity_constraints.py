"""
Activity classification. The only place category knowledge enters the scheduler.
"""

import enum
from study_scheduler.models import ActivityCategory
from study_scheduler.schemas import Activity
from ..core.constants import FIXED_CATEGORIES, LEARNING_MARKER_PHRASE, WRAPPING_CATEGORIES


class ActivityRole(str, enum.Enum):
    FIXED = "fixed"
    CANDIDATE = "candidate"
    GENERATED = "generated"
    ORDINARY = "ordinary"


# One entry per category so the lookup never misses
CATEGORY_IS_FIXED = {category: category in FIXED_CATEGORIES for category in ActivityCategory}


def is_fixed_activity(activity: Activity) -> bool:
    """Fixed activities (classes, work, sleep, meals, routines, commutes) are never displaced."""
    return CATEGORY_IS_FIXED[activity.category]


def is_learning_candidate(activity: Activity) -> bool:
    """Flexible activities, or ones whose details mark them as a possible learning slot."""
    if activity.category == ActivityCategory.FLEXIBLE:
        return True
    return bool(activity.details) and LEARNING_MARKER_PHRASE in activity.details.lower()


def is_generated_activity(activity: Activity) -> bool:
    return activity.generated


def may_wrap_midnight(activity: Activity) -> bool:
    return activity.category in WRAPPING_CATEGORIES


def classify_activity(activity: Activity) -> ActivityRole:
    if is_generated_activity(activity):
        return ActivityRole.GENERATED
    if is_fixed_activity(activity):
        return ActivityRole.FIXED
    if is_learning_candidate(activity):
        return ActivityRole.CANDIDATE
    return ActivityRole.ORDINARY
