import rundeckjob.defaults as defaults
from rundeckjob.errors import InvalidScheduleFields, MalformedSchedule
from rundeckjob.logger import logger
from rundeckjob.types import (
    Schedule,
    ScheduleMonth,
    ScheduleTime,
    ScheduleWeekDay,
    ScheduleYear,
)


def decode(text):
    """
    Parse a 7 field cron expression into a Schedule.

    The fields are seconds, minute, hour, day-of-month, month, day-of-week
    and year. One of the two day fields must be "?" unless both are "*".
    """
    fields = text.split()
    if len(fields) != defaults.schedule_fields:
        raise MalformedSchedule(text, defaults.schedule_help)

    schedule = Schedule(
        time=ScheduleTime(seconds=fields[0], minute=fields[1], hour=fields[2]),
        month=ScheduleMonth(day=fields[3], month=fields[4]),
        weekday=ScheduleWeekDay(day=fields[5]),
        year=ScheduleYear(year=fields[6]),
    )
    validate(schedule, text)
    logger.debug(f"decoded schedule '{text}'")
    return schedule


def validate(schedule, text=None):
    """
    Check the day-of-month and day-of-week exclusion on a Schedule.

    A schedule assembled by hand should go through here before it is trusted.
    """
    month_day = schedule.month.day
    week_day = schedule.weekday.day
    text = text or " ".join(fields(schedule))

    # Both can be asterisks, but otherwise one, and only one, must be a '?'
    if month_day == week_day:
        if month_day != "*":
            raise InvalidScheduleFields(text, month_day, week_day)
    elif month_day != "?" and week_day != "?":
        raise InvalidScheduleFields(text, month_day, week_day)
    return schedule


def fields(schedule):
    """
    Return the seven fields of a schedule, filling in empty day fields.
    """
    month_day = schedule.month.day
    week_day = schedule.weekday.day
    if not month_day:
        month_day = "*" if week_day in ["*", ""] else "?"
    if not week_day:
        week_day = "*" if month_day == "*" else "?"
    return [
        schedule.time.seconds,
        schedule.time.minute,
        schedule.time.hour,
        month_day,
        schedule.month.month,
        week_day,
        schedule.year.year,
    ]


def encode(schedule):
    """
    Serialize a Schedule to canonical cron text. The schedule is not changed.
    """
    return " ".join(fields(schedule))
