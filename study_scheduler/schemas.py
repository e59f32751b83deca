import logging
from pydantic import BaseModel, Field, field_validator
from datetime import datetime
from typing import Optional, List, Dict, Iterator, Tuple
from .models import ActivityCategory, DayOfWeek, DAYS_OF_WEEK

logger = logging.getLogger(__name__)

# ----------------- Activity Schemas ---------------------

class Activity(BaseModel):
    """
    One scheduled item. Accepts the stored JSON names (activity, type,
    isAutoGenerated) as well as the Python field names.
    """
    start_time: str
    end_time: str
    name: str = Field(default="", alias="activity")
    category: ActivityCategory = Field(default=ActivityCategory.OTHER, alias="type")
    details: Optional[str] = None
    generated: bool = Field(default=False, alias="isAutoGenerated")

    class Config:
        populate_by_name = True
        frozen = True

    @field_validator("category", mode="before")
    @classmethod
    def coerce_unknown_category(cls, value):
        if isinstance(value, ActivityCategory) or value is None:
            return value or ActivityCategory.OTHER
        try:
            return ActivityCategory(value)
        except ValueError:
            logger.debug(f"Unknown activity category {value!r}, treating as Other")
            return ActivityCategory.OTHER


class WeekSchedule(BaseModel):
    """A week of activities keyed by day name; all seven days are always present."""
    Monday: List[Activity] = Field(default_factory=list)
    Tuesday: List[Activity] = Field(default_factory=list)
    Wednesday: List[Activity] = Field(default_factory=list)
    Thursday: List[Activity] = Field(default_factory=list)
    Friday: List[Activity] = Field(default_factory=list)
    Saturday: List[Activity] = Field(default_factory=list)
    Sunday: List[Activity] = Field(default_factory=list)

    @field_validator("*", mode="before")
    @classmethod
    def missing_day_is_empty(cls, value):
        return [] if value is None else value

    def day(self, day_name) -> List[Activity]:
        if isinstance(day_name, DayOfWeek):
            day_name = day_name.value
        return list(getattr(self, day_name))

    def items(self) -> Iterator[Tuple[str, List[Activity]]]:
        for day_name in DAYS_OF_WEEK:
            yield day_name, self.day(day_name)

    @classmethod
    def from_days(cls, days: Dict[str, List[Activity]]) -> "WeekSchedule":
        return cls(**{day_name: list(days.get(day_name, [])) for day_name in DAYS_OF_WEEK})

    def to_json_dict(self) -> dict:
        return self.model_dump(mode="json", by_alias=True)


# ----------------- Learning Config Schemas ---------------------

class SubjectPriority(BaseModel):
    name: str
    weight: float = 1.0

    class Config:
        frozen = True


DEFAULT_SUBJECT_PRIORITIES = [
    SubjectPriority(name="Business Statistics", weight=3),
    SubjectPriority(name="Micro-Economics", weight=2),
    SubjectPriority(name="Spanish", weight=1),
]


class LearningConfig(BaseModel):
    """Parameters for learning block placement. Never validated by the engine itself."""
    min_block_minutes: int = Field(default=25, alias="minBlockMinutes")
    ideal_block_minutes: int = Field(default=50, alias="idealBlockMinutes")
    max_block_minutes: int = Field(default=90, alias="maxBlockMinutes")
    minimum_suitability_score: int = Field(default=50, alias="minimumSuitabilityScore")
    max_daily_blocks: int = Field(default=3, alias="maxDailyBlocks")
    daily_learning_minutes: int = Field(default=120, alias="dailyLearningMinutes")
    round_to_minutes: int = Field(default=5, alias="roundToMinutes")
    preferred_hours: List[int] = Field(default_factory=lambda: [8, 9, 10, 14, 15, 16], alias="preferredHours")
    subject_priorities: List[SubjectPriority] = Field(
        default_factory=lambda: list(DEFAULT_SUBJECT_PRIORITIES), alias="subjectPriorities"
    )
    preserve_flexible_activities: bool = Field(default=False, alias="preserveFlexibleActivities")

    class Config:
        populate_by_name = True
        frozen = True


def validate_learning_config(config: LearningConfig) -> List[str]:
    """
    Caller-side sanity checks for a LearningConfig.
    Returns a list of problems; empty means the config is usable.
    """
    problems = []

    for field_name in ("min_block_minutes", "ideal_block_minutes", "max_block_minutes",
                       "daily_learning_minutes", "max_daily_blocks", "round_to_minutes"):
        if getattr(config, field_name) < 0:
            problems.append(f"{field_name} must not be negative")

    if config.min_block_minutes > config.max_block_minutes:
        problems.append("min_block_minutes must not exceed max_block_minutes")
    if not (config.min_block_minutes <= config.ideal_block_minutes <= config.max_block_minutes):
        problems.append("ideal_block_minutes must lie between min_block_minutes and max_block_minutes")
    if not 0 <= config.minimum_suitability_score <= 100:
        problems.append("minimum_suitability_score must be between 0 and 100")

    bad_hours = [hour for hour in config.preferred_hours if not 0 <= hour <= 23]
    if bad_hours:
        problems.append(f"preferred_hours out of range 0-23: {bad_hours}")

    for subject in config.subject_priorities:
        if not subject.name.strip():
            problems.append("subject_priorities entries need a name")
            break

    return problems


# ----------------- API Schemas ---------------------

class OptimizeRequest(BaseModel):
    schedule: WeekSchedule
    config: Optional[LearningConfig] = None


class DaySummary(BaseModel):
    day: str
    blocks: int
    minutes: int


class OptimizeResponse(BaseModel):
    schedule: WeekSchedule
    summary: List[DaySummary]
    total_blocks: int
    total_minutes: int


class SavedScheduleOut(BaseModel):
    name: str
    updated_at: datetime
    schedule: WeekSchedule
