"""
Main slot scoring aggregator that combines all domain-specific scoring functions.
"""

import logging
from typing import Sequence
from study_scheduler.schemas import Activity
from ..core.time_slot import Slot, ScoredSlot
from ..core.constants import BASE_SUITABILITY, FLEXIBLE_CONTENT_PENALTY
from ..constraints.activity_constraints import is_fixed_activity, is_learning_candidate
from ..utils.slot_utils import find_overlapping_activities

from .context_scoring import calculate_preceding_context_score
from .time_scoring import calculate_time_preference_score, calculate_duration_fit_score

logger = logging.getLogger(__name__)


def calculate_slot_score(slot: Slot, day_activities: Sequence[Activity], config) -> ScoredSlot:
    """
    Rate a slot 0-100 for holding a learning block.

    Starts at 100, applies the occupancy, context, time-of-day and duration
    adjustments in a fixed order, then clamps. Too-short slots and slots that
    contain a fixed activity short-circuit to 0.
    """
    if slot.duration_minutes <= 0:
        return ScoredSlot(slot, 0, reason="empty slot")

    if slot.duration_minutes < config.min_block_minutes:
        return ScoredSlot(slot, 0, reason="too short")

    overlapping = find_overlapping_activities(slot, day_activities)

    # Slots come from gaps between fixed activities, so this only trips on overlapping input
    if any(is_fixed_activity(activity) for activity in overlapping):
        logger.debug(f"Slot {slot.start_time}-{slot.end_time} contains a fixed activity")
        return ScoredSlot(slot, 0, blocked_by_fixed=True, reason="contains fixed activity",
                          overlapping_activities=overlapping)

    overlaps_flexible = any(not is_learning_candidate(activity) for activity in overlapping)

    if overlaps_flexible and config.preserve_flexible_activities:
        return ScoredSlot(slot, 0, overlaps_flexible=True, reason="preserves flexible activities",
                          overlapping_activities=overlapping)

    suitability = BASE_SUITABILITY
    if overlaps_flexible:
        suitability -= FLEXIBLE_CONTENT_PENALTY

    suitability += calculate_preceding_context_score(slot)
    suitability += calculate_time_preference_score(slot, config)
    suitability += calculate_duration_fit_score(slot, config)

    suitability = max(0, min(100, suitability))

    reason = None
    if suitability < config.minimum_suitability_score:
        reason = "low suitability score"

    return ScoredSlot(slot, suitability, overlaps_flexible=overlaps_flexible, reason=reason,
                      overlapping_activities=overlapping)


def score_day_slots(slots: Sequence[Slot], day_activities: Sequence[Activity], config):
    return [calculate_slot_score(slot, day_activities, config) for slot in slots]
