"""
Learning Block Scheduling System

Finds the gaps between fixed commitments, scores them for learning and
greedily fills the best ones with generated study blocks.
Pure and synchronous: no I/O, no state kept between calls.
"""

from .core.scheduler import (
    LearningBlockScheduler,
    generate_learning_blocks_for_day,
    generate_learning_schedule,
    summarize_generated_blocks,
)
from .core.time_slot import Slot, ScoredSlot
from .core.time_model import to_minutes, minutes_to_time_str, duration_minutes, format_duration

__version__ = "1.0.0"
