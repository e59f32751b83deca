"""
Stores week schedules as JSON rows. Overnight sleep is split at midnight on
the way in, so the scheduler only ever sees same-day activities.
"""

import logging
from datetime import datetime
from typing import List, Optional
from sqlalchemy.orm import Session

from ..models import SavedSchedule, ActivityCategory, DayOfWeek
from ..schemas import WeekSchedule
from ..scheduling.core.time_model import to_minutes

logger = logging.getLogger(__name__)

MIDNIGHT = "00:00"


def _crosses_midnight(activity) -> bool:
    if activity.category != ActivityCategory.SLEEP or activity.end_time == MIDNIGHT:
        return False
    return to_minutes(activity.end_time) <= to_minutes(activity.start_time)


def split_overnight_activities(week: WeekSchedule) -> WeekSchedule:
    """
    Split each sleep that runs past midnight into an evening part ending at
    00:00 and a morning part at the head of the next day (Sunday wraps to
    Monday). Already split schedules come back unchanged.
    """
    days = {day_name: activities for day_name, activities in week.items()}

    for day in DayOfWeek:
        next_day = day.next_day().value
        kept = []
        for activity in days[day.value]:
            if not _crosses_midnight(activity):
                kept.append(activity)
                continue
            kept.append(activity.model_copy(update={"end_time": MIDNIGHT}))
            days[next_day].insert(0, activity.model_copy(update={"start_time": MIDNIGHT}))
            logger.debug(f"Split overnight '{activity.name}' from {day.value} into {next_day}")
        days[day.value] = kept

    return WeekSchedule.from_days(days)


def get_saved_schedule(db: Session, name: str) -> Optional[SavedSchedule]:
    return db.query(SavedSchedule).filter(SavedSchedule.name == name).first()


def load_week_schedule(db: Session, name: str) -> Optional[WeekSchedule]:
    saved = get_saved_schedule(db, name)
    if not saved:
        return None
    return WeekSchedule.model_validate(saved.data)


def save_week_schedule(db: Session, name: str, week: WeekSchedule) -> SavedSchedule:
    """Normalise and upsert a schedule under the given name."""
    normalized = split_overnight_activities(week)
    saved = get_saved_schedule(db, name)

    if saved:
        saved.data = normalized.to_json_dict()
        saved.updated_at = datetime.utcnow()
    else:
        saved = SavedSchedule(name=name, data=normalized.to_json_dict())
        db.add(saved)

    db.commit()
    db.refresh(saved)
    logger.info(f"Saved schedule '{name}'")
    return saved


def delete_week_schedule(db: Session, name: str) -> bool:
    saved = get_saved_schedule(db, name)
    if not saved:
        return False
    db.delete(saved)
    db.commit()
    logger.info(f"Deleted schedule '{name}'")
    return True


def list_schedule_names(db: Session) -> List[str]:
    return [row.name for row in db.query(SavedSchedule).order_by(SavedSchedule.name.asc()).all()]
