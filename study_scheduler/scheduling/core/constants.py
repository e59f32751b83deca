"""
Shared constants for the learning block scheduler.
"""

from study_scheduler.models import ActivityCategory

MINUTES_PER_DAY = 24 * 60

# Categories that can never be displaced by a generated block
FIXED_CATEGORIES = frozenset({
    ActivityCategory.UNIVERSITY,
    ActivityCategory.WORK,
    ActivityCategory.SLEEP,
    ActivityCategory.MEAL,
    ActivityCategory.ROUTINE,
    ActivityCategory.TRAVEL,
})

# Only these may legitimately end "before" they start (past midnight)
WRAPPING_CATEGORIES = frozenset({ActivityCategory.SLEEP})

# Phrase in an activity's details that marks it as a possible learning slot
LEARNING_MARKER_PHRASE = "possible learn option"

# Matched as lower-case substrings of the preceding activity name
COGNITIVE_LOAD_KEYWORDS = ("intensive", "exam")
TRANSITION_KEYWORDS = ("break", "meal")

# Scoring weights
BASE_SUITABILITY = 100
FLEXIBLE_CONTENT_PENALTY = 30
COGNITIVE_LOAD_PENALTY = 20
TRANSITION_BONUS = 10
PREFERRED_HOUR_BONUS = 15
IDEAL_DURATION_BONUS = 10
IDEAL_DURATION_TOLERANCE = 15

# Generated block texture
GENERATED_CATEGORY = ActivityCategory.STUDY_INTENSIVE
GENERATED_DETAILS = "Automatically scheduled learning block"
GENERATED_NAME_PREFIX = "Learning: "
FALLBACK_SUBJECT = "General Learning"
