"""
Main scheduler that places learning blocks into a week of fixed activities.
"""

import logging
from typing import List, Dict, Optional, Sequence
from study_scheduler.schemas import Activity, WeekSchedule, LearningConfig, DaySummary
from .time_slot import ScoredSlot
from .time_model import to_minutes
from ..utils.slot_utils import find_available_slots, sort_by_start
from ..scoring.slot_scoring import score_day_slots
from ..algorithms.block_builder import build_learning_block
from ..constraints.activity_constraints import is_generated_activity

logger = logging.getLogger(__name__)

# ================================
# DAY ALLOCATION
# ================================

def rank_eligible_slots(scored_slots: Sequence[ScoredSlot], config) -> List[ScoredSlot]:
    """Eligible slots, best first; equal scores go to the earlier slot."""
    eligible = [slot for slot in scored_slots if slot.is_eligible(config)]
    eligible.sort(key=lambda slot: (-slot.suitability, slot.start_minutes))
    return eligible


def generate_learning_blocks_for_day(day_activities: Sequence[Activity], config) -> List[Activity]:
    """
    Greedily fill one day's gaps with learning blocks.

    Walks eligible slots from the highest suitability down, spending the daily
    budget until it is gone or max_daily_blocks blocks were accepted. Each
    block stays inside its own slot, so accepted blocks never overlap.
    """
    slots = find_available_slots(day_activities)
    scored_slots = score_day_slots(slots, day_activities, config)
    for scored in scored_slots:
        logger.debug(f"Scored {scored}")

    blocks: List[Activity] = []
    remaining_minutes = config.daily_learning_minutes

    for scored in rank_eligible_slots(scored_slots, config):
        if remaining_minutes <= 0 or len(blocks) >= config.max_daily_blocks:
            break

        block = build_learning_block(scored, remaining_minutes, config, block_index=len(blocks))
        if block is None:
            continue

        blocks.append(block)
        remaining_minutes -= to_minutes(block.end_time) - to_minutes(block.start_time)
        logger.debug(f"Accepted {block.name} {block.start_time}-{block.end_time}, {remaining_minutes}min left")

    return blocks


# ================================
# WEEK ORCHESTRATION
# ================================

def strip_generated_activities(day_activities: Sequence[Activity]) -> List[Activity]:
    return [activity for activity in day_activities if not is_generated_activity(activity)]


def generate_learning_schedule(week: WeekSchedule, config) -> WeekSchedule:
    """
    Replace every previously generated block in the week with a fresh allocation.

    Days are independent: a day that cannot be processed keeps only its
    human-entered activities. The input week is left untouched.
    """
    new_days: Dict[str, List[Activity]] = {}

    for day_name, day_activities in week.items():
        kept = strip_generated_activities(day_activities)
        try:
            blocks = generate_learning_blocks_for_day(kept, config)
        except (ValueError, TypeError) as e:
            logger.warning(f"Skipping learning blocks for {day_name}: {e}")
            blocks = []

        new_days[day_name] = sort_by_start(kept + blocks)
        if blocks:
            logger.info(f"{day_name}: placed {len(blocks)} learning block(s)")

    return WeekSchedule.from_days(new_days)


def summarize_generated_blocks(week: WeekSchedule) -> List[DaySummary]:
    summary = []
    for day_name, day_activities in week.items():
        generated = [activity for activity in day_activities if is_generated_activity(activity)]
        minutes = sum(to_minutes(a.end_time) - to_minutes(a.start_time) for a in generated)
        summary.append(DaySummary(day=day_name, blocks=len(generated), minutes=minutes))
    return summary


class LearningBlockScheduler:
    """
    Holds a LearningConfig and applies it to days or whole weeks.
    Stateless between calls; the same input always yields the same output.
    """
    def __init__(self, config: Optional[LearningConfig] = None):
        self.config = config or LearningConfig()

    def allocate_day(self, day_activities: Sequence[Activity]) -> List[Activity]:
        return generate_learning_blocks_for_day(strip_generated_activities(day_activities), self.config)

    def optimize_week(self, week: WeekSchedule) -> WeekSchedule:
        return generate_learning_schedule(week, self.config)

    def summarize(self, week: WeekSchedule) -> List[DaySummary]:
        return summarize_generated_blocks(week)

    def __repr__(self):
        return (f"LearningBlockScheduler(daily={self.config.daily_learning_minutes}min, "
                f"max_blocks={self.config.max_daily_blocks})")
