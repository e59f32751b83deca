from sqlalchemy import String, JSON
from sqlalchemy.orm import Mapped, mapped_column
from datetime import datetime
from .database import Base
import enum

# Enums

class ActivityCategory(str, enum.Enum):
    UNIVERSITY = "University"
    WORK = "Work"
    SLEEP = "Sleep"
    MEAL = "Meal"
    ROUTINE = "Routine"
    TRAVEL = "Travel"
    BREAK = "Break"
    FLEXIBLE = "Flexible"
    STUDY_INTENSIVE = "Study_Intensive"
    STUDY_REVIEW = "Study_Review"
    STUDY_PREP = "Study_Prep"
    LANGUAGE = "Language"
    FREE_TIME = "Free_Time"
    BUFFER = "Buffer"
    HOUSEWORK = "Housework"
    OTHER = "Other"

class DayOfWeek(str, enum.Enum):
    MONDAY = "Monday"
    TUESDAY = "Tuesday"
    WEDNESDAY = "Wednesday"
    THURSDAY = "Thursday"
    FRIDAY = "Friday"
    SATURDAY = "Saturday"
    SUNDAY = "Sunday"

    def next_day(self) -> "DayOfWeek":
        days = list(DayOfWeek)
        return days[(days.index(self) + 1) % len(days)]


DAYS_OF_WEEK = [day.value for day in DayOfWeek]


# Tables

class SavedSchedule(Base):
    __tablename__ = "saved_schedules"

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    name: Mapped[str] = mapped_column(String, unique=True, index=True, nullable=False)

    # Week schedule exactly as serialised by WeekSchedule.to_json_dict()
    data: Mapped[dict] = mapped_column(JSON, nullable=False)

    created_at: Mapped[datetime] = mapped_column(default=datetime.utcnow)
    updated_at: Mapped[datetime] = mapped_column(default=datetime.utcnow, onupdate=datetime.utcnow)

    def __repr__(self):
        return f"SavedSchedule(name={self.name!r}, updated_at={self.updated_at})"
