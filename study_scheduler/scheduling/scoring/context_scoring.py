"""
Scoring based on what happens right before a slot.
"""

from ..core.time_slot import Slot
from ..core.constants import (
    COGNITIVE_LOAD_KEYWORDS, TRANSITION_KEYWORDS, COGNITIVE_LOAD_PENALTY, TRANSITION_BONUS
)


def _name_contains_any(name: str, keywords) -> bool:
    lowered = (name or "").lower()
    return any(keyword in lowered for keyword in keywords)


def follows_high_cognitive_load(slot: Slot) -> bool:
    return _name_contains_any(slot.preceding_activity_name, COGNITIVE_LOAD_KEYWORDS)


def follows_natural_transition(slot: Slot) -> bool:
    return _name_contains_any(slot.preceding_activity_name, TRANSITION_KEYWORDS)


def calculate_preceding_context_score(slot: Slot) -> int:
    """
    -20 after mentally taxing activities (exams, intensive sessions),
    +10 after breaks and meals. Both can apply.
    """
    score = 0
    if follows_high_cognitive_load(slot):
        score -= COGNITIVE_LOAD_PENALTY
    if follows_natural_transition(slot):
        score += TRANSITION_BONUS
    return score
