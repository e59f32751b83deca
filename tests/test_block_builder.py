"""Tests for scheduling/algorithms/block_builder.py."""

from study_scheduler.models import ActivityCategory
from study_scheduler.schemas import LearningConfig, SubjectPriority
from study_scheduler.scheduling.core.time_slot import Slot, ScoredSlot
from study_scheduler.scheduling.algorithms.block_builder import (
    build_learning_block, rank_subjects, pick_subject, round_end_minutes
)


def scored(start, end, duration, score=100):
    return ScoredSlot(Slot(start, end, duration, "Lecture", "Shift"), score)


def test_block_fills_slot_when_it_fits(config):
    block = build_learning_block(scored("12:00", "13:00", 60), 120, config)

    assert (block.start_time, block.end_time) == ("12:00", "13:00")
    assert block.name == "Learning: Business Statistics"
    assert block.category == ActivityCategory.STUDY_INTENSIVE
    assert block.details == "Automatically scheduled learning block"
    assert block.generated is True


def test_block_capped_by_max_block_minutes(config):
    block = build_learning_block(scored("12:00", "14:00", 120), 300, config)
    assert (block.start_time, block.end_time) == ("12:00", "13:30")


def test_block_capped_by_remaining_budget(config):
    block = build_learning_block(scored("12:00", "14:00", 120), 30, config)
    assert (block.start_time, block.end_time) == ("12:00", "12:30")


def test_block_rejected_when_budget_below_minimum(config):
    assert build_learning_block(scored("12:00", "14:00", 120), 20, config) is None


def test_block_rejected_when_slot_below_minimum(config):
    assert build_learning_block(scored("12:00", "12:20", 20), 120, config) is None


def test_end_rounds_to_nearest_multiple(config):
    block = build_learning_block(scored("12:02", "13:00", 58), 30, config)
    assert (block.start_time, block.end_time) == ("12:02", "12:30")


def test_rounding_never_overshoots_cap(config):
    # 12:03 + 90 = 13:33 would round up to 13:35 (92 min); rounds down instead
    block = build_learning_block(scored("12:03", "14:00", 117), 300, config)
    assert (block.start_time, block.end_time) == ("12:03", "13:30")


def test_rounding_clamped_to_slot_end(config):
    # 12:48 would round to 12:50, past the slot end
    block = build_learning_block(scored("12:00", "12:48", 48), 120, config)
    assert (block.start_time, block.end_time) == ("12:00", "12:48")


def test_rounding_can_push_block_under_minimum(config):
    # 27 min budget: 12:29 -> 12:30 would be 28 min, so 12:25 -> 23 min < 25
    assert build_learning_block(scored("12:02", "13:00", 58), 27, config) is None


def test_rounding_disabled():
    config = LearningConfig(round_to_minutes=0)
    block = build_learning_block(scored("12:02", "13:00", 58), 30, config)
    assert (block.start_time, block.end_time) == ("12:02", "12:32")


def test_round_end_minutes_half_up():
    assert round_end_minutes(0, 15, 10, 100) == 20
    assert round_end_minutes(0, 14, 10, 100) == 10
    assert round_end_minutes(0, 17, 0, 100) == 17


def test_rank_subjects_by_weight_then_list_order():
    config = LearningConfig(subject_priorities=[
        SubjectPriority(name="Art", weight=1),
        SubjectPriority(name="Biology", weight=3),
        SubjectPriority(name="Chemistry", weight=3),
    ])
    assert rank_subjects(config) == ["Biology", "Chemistry", "Art"]


def test_rank_subjects_falls_back_when_empty():
    assert rank_subjects(LearningConfig(subject_priorities=[])) == ["General Learning"]


def test_subjects_rotate_by_block_index(config):
    assert pick_subject(config, 0) == "Business Statistics"
    assert pick_subject(config, 1) == "Micro-Economics"
    assert pick_subject(config, 3) == "Business Statistics"
    block = build_learning_block(scored("12:00", "13:00", 60), 120, config, block_index=2)
    assert block.name == "Learning: Spanish"
