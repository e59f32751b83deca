"""
Schedule API endpoints for frontend
"""

import logging
from typing import List, Optional
from fastapi import APIRouter, Depends, HTTPException, Body
from sqlalchemy.orm import Session

from ..config import get_default_learning_config
from ..database import get_db
from ..schemas import (
    WeekSchedule, LearningConfig, OptimizeRequest, OptimizeResponse, SavedScheduleOut,
    validate_learning_config,
)
from ..scheduling import LearningBlockScheduler
from ..services.schedule_store import (
    split_overnight_activities, save_week_schedule, get_saved_schedule, delete_week_schedule,
    list_schedule_names,
)

logger = logging.getLogger(__name__)

router = APIRouter()


def _checked_config(config: Optional[LearningConfig]) -> LearningConfig:
    config = config or get_default_learning_config()
    problems = validate_learning_config(config)
    if problems:
        raise HTTPException(status_code=400, detail=problems)
    return config


def _optimize(week: WeekSchedule, config: LearningConfig) -> OptimizeResponse:
    scheduler = LearningBlockScheduler(config)
    optimized = scheduler.optimize_week(split_overnight_activities(week))
    summary = scheduler.summarize(optimized)
    return OptimizeResponse(
        schedule=optimized,
        summary=summary,
        total_blocks=sum(day.blocks for day in summary),
        total_minutes=sum(day.minutes for day in summary),
    )


def _saved_out(saved) -> SavedScheduleOut:
    return SavedScheduleOut(
        name=saved.name,
        updated_at=saved.updated_at,
        schedule=WeekSchedule.model_validate(saved.data),
    )


@router.get("/config/default", response_model=LearningConfig)
async def get_default_config():
    """Learning block settings used when a request sends none."""
    return get_default_learning_config()


@router.post("/optimize", response_model=OptimizeResponse)
async def optimize_schedule(request: OptimizeRequest):
    """
    Fill the free time of a week with learning blocks.
    Stateless: nothing is stored.
    """
    config = _checked_config(request.config)
    return _optimize(request.schedule, config)


@router.get("/", response_model=List[str])
async def list_schedules(db: Session = Depends(get_db)):
    return list_schedule_names(db)


@router.get("/{name}", response_model=SavedScheduleOut)
async def get_schedule(name: str, db: Session = Depends(get_db)):
    saved = get_saved_schedule(db, name)
    if not saved:
        raise HTTPException(status_code=404, detail=f"Schedule '{name}' not found")
    return _saved_out(saved)


@router.put("/{name}", response_model=SavedScheduleOut)
async def put_schedule(name: str, schedule: WeekSchedule, db: Session = Depends(get_db)):
    saved = save_week_schedule(db, name, schedule)
    return _saved_out(saved)


@router.delete("/{name}")
async def delete_schedule(name: str, db: Session = Depends(get_db)):
    if not delete_week_schedule(db, name):
        raise HTTPException(status_code=404, detail=f"Schedule '{name}' not found")
    return {"message": f"Schedule '{name}' deleted"}


@router.post("/{name}/optimize", response_model=OptimizeResponse)
async def optimize_saved_schedule(
    name: str,
    config: Optional[LearningConfig] = Body(default=None),
    db: Session = Depends(get_db),
):
    """Optimize a stored schedule and store the result under the same name."""
    saved = get_saved_schedule(db, name)
    if not saved:
        raise HTTPException(status_code=404, detail=f"Schedule '{name}' not found")

    config = _checked_config(config)
    result = _optimize(WeekSchedule.model_validate(saved.data), config)
    save_week_schedule(db, name, result.schedule)
    logger.info(f"Optimized schedule '{name}': {result.total_blocks} block(s), {result.total_minutes}min")
    return result
