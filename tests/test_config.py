"""Tests for config.py and the pydantic schemas."""

from study_scheduler import config as app_config
from study_scheduler.models import ActivityCategory, DayOfWeek
from study_scheduler.schemas import Activity, LearningConfig, SubjectPriority, WeekSchedule, validate_learning_config


def test_default_learning_config_values():
    config = LearningConfig()
    assert config.min_block_minutes == 25
    assert config.ideal_block_minutes == 50
    assert config.max_block_minutes == 90
    assert config.minimum_suitability_score == 50
    assert config.max_daily_blocks == 3
    assert config.daily_learning_minutes == 120
    assert config.round_to_minutes == 5
    assert config.preferred_hours == [8, 9, 10, 14, 15, 16]
    assert [s.name for s in config.subject_priorities] == ["Business Statistics", "Micro-Economics", "Spanish"]
    assert validate_learning_config(config) == []


def test_learning_config_accepts_wire_names():
    config = LearningConfig.model_validate({"minBlockMinutes": 30, "maxDailyBlocks": 2, "preferredHours": [7]})
    assert (config.min_block_minutes, config.max_daily_blocks, config.preferred_hours) == (30, 2, [7])


def test_validate_learning_config_reports_problems():
    config = LearningConfig(
        min_block_minutes=60,
        max_block_minutes=30,
        minimum_suitability_score=120,
        preferred_hours=[25],
        subject_priorities=[SubjectPriority(name=" ")],
        daily_learning_minutes=-5,
    )
    problems = validate_learning_config(config)
    assert "min_block_minutes must not exceed max_block_minutes" in problems
    assert "daily_learning_minutes must not be negative" in problems
    assert "minimum_suitability_score must be between 0 and 100" in problems
    assert "preferred_hours out of range 0-23: [25]" in problems
    assert "subject_priorities entries need a name" in problems


def test_env_overrides(monkeypatch):
    monkeypatch.setattr(app_config, "LEARNING_DAILY_MINUTES", "90")
    monkeypatch.setattr(app_config, "LEARNING_MAX_DAILY_BLOCKS", "2")
    monkeypatch.setattr(app_config, "LEARNING_PREFERRED_HOURS", "7, 8,19")

    config = app_config.get_default_learning_config()
    assert config.daily_learning_minutes == 90
    assert config.max_daily_blocks == 2
    assert config.preferred_hours == [7, 8, 19]


def test_malformed_env_overrides_fall_back(monkeypatch, caplog):
    monkeypatch.setattr(app_config, "LEARNING_DAILY_MINUTES", "lots")
    monkeypatch.setattr(app_config, "LEARNING_MAX_DAILY_BLOCKS", None)
    monkeypatch.setattr(app_config, "LEARNING_PREFERRED_HOURS", "7,noon")

    config = app_config.get_default_learning_config()
    assert config.daily_learning_minutes == 120
    assert config.preferred_hours == [8, 9, 10, 14, 15, 16]
    assert "LEARNING_DAILY_MINUTES" in caplog.text


def test_activity_wire_names_round_trip():
    activity = Activity.model_validate({
        "start_time": "09:00", "end_time": "10:00", "activity": "Lecture", "type": "University",
        "isAutoGenerated": False,
    })
    assert activity.name == "Lecture"
    assert activity.category == ActivityCategory.UNIVERSITY
    dumped = activity.model_dump(by_alias=True, mode="json")
    assert dumped["activity"] == "Lecture"
    assert dumped["type"] == "University"


def test_unknown_category_becomes_other():
    activity = Activity.model_validate({"start_time": "09:00", "end_time": "10:00", "type": "Gym"})
    assert activity.category == ActivityCategory.OTHER


def test_week_schedule_always_has_seven_days():
    week = WeekSchedule.model_validate({"Monday": None, "Friday": []})
    assert [day for day, _ in week.items()] == [day.value for day in DayOfWeek]
    assert week.day(DayOfWeek.MONDAY) == []
    assert set(week.to_json_dict()) == {day.value for day in DayOfWeek}


def test_day_of_week_wraps():
    assert DayOfWeek.SUNDAY.next_day() == DayOfWeek.MONDAY
    assert DayOfWeek.MONDAY.next_day() == DayOfWeek.TUESDAY
