"""
Turns a chosen slot into a concrete, flagged learning activity.
"""

import logging
from typing import List, Optional
from study_scheduler.schemas import Activity
from ..core.time_slot import ScoredSlot
from ..core.time_model import minutes_to_time_str
from ..core.constants import (
    GENERATED_CATEGORY, GENERATED_DETAILS, GENERATED_NAME_PREFIX, FALLBACK_SUBJECT
)

logger = logging.getLogger(__name__)


def rank_subjects(config) -> List[str]:
    """Subject names by weight, heaviest first; equal weights keep their listed order."""
    ranked = sorted(
        enumerate(config.subject_priorities),
        key=lambda item: (-item[1].weight, item[0]),
    )
    names = [subject.name for _, subject in ranked if subject.name]
    return names or [FALLBACK_SUBJECT]


def pick_subject(config, block_index: int = 0) -> str:
    subjects = rank_subjects(config)
    return subjects[block_index % len(subjects)]


def round_end_minutes(start_minutes: int, end_minutes: int, round_to: int, cap_minutes: int) -> int:
    """
    Round the end to the nearest multiple of round_to (halves round up).
    Falls back to rounding down when rounding up would overshoot the cap.
    """
    if round_to <= 0:
        return end_minutes

    rounded = (end_minutes + round_to // 2) // round_to * round_to
    if rounded - start_minutes > cap_minutes:
        rounded = end_minutes // round_to * round_to
    return rounded


def build_learning_block(scored_slot: ScoredSlot, remaining_minutes: int, config,
                         block_index: int = 0) -> Optional[Activity]:
    """
    Create a generated learning activity at the start of the slot.

    The block is as long as the slot allows, capped by max_block_minutes and the
    remaining daily budget, then end-rounded and clamped to the slot end.
    Returns None when what is left falls under min_block_minutes.
    """
    cap_minutes = min(config.max_block_minutes, remaining_minutes)
    actual_duration = min(scored_slot.duration_minutes, cap_minutes)

    if actual_duration < config.min_block_minutes:
        logger.debug(f"Rejected {scored_slot}: {actual_duration}min is under the minimum")
        return None

    start_minutes = scored_slot.start_minutes
    end_minutes = round_end_minutes(
        start_minutes, start_minutes + actual_duration, config.round_to_minutes, cap_minutes
    )

    slot_end_minutes = scored_slot.start_minutes + scored_slot.duration_minutes
    if end_minutes > slot_end_minutes:
        end_minutes = slot_end_minutes

    final_duration = end_minutes - start_minutes
    if final_duration <= 0 or final_duration < config.min_block_minutes:
        logger.debug(f"Rejected {scored_slot}: {final_duration}min after rounding")
        return None

    subject = pick_subject(config, block_index)

    return Activity(
        start_time=minutes_to_time_str(start_minutes),
        end_time=minutes_to_time_str(end_minutes),
        name=f"{GENERATED_NAME_PREFIX}{subject}",
        category=GENERATED_CATEGORY,
        details=GENERATED_DETAILS,
        generated=True,
    )
