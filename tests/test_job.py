import copy

import pytest

import rundeckjob.defaults as defaults
from rundeckjob.errors import (
    InvalidScheduleFields,
    MalformedSchedule,
    OptionValidationError,
    TooManyBlocks,
    TranslationError,
)
from rundeckjob.translate import job_from_flat, job_to_flat
from rundeckjob.types import Dispatch, Job, NodeFilter


def test_from_flat_full_record(record):
    job = job_from_flat(record)
    assert job.id == ""
    assert job.name == "backup"
    assert job.timeout == "2h"
    assert job.time_zone == "America/New_York"
    assert job.dispatch == Dispatch(
        max_thread_count=4,
        continue_next_node_on_error=True,
        rank_attribute="rank",
        rank_order="descending",
        success_on_empty_node_filter=True,
    )
    assert job.node_filter == NodeFilter("tags: db", "name: db-03", True)
    assert job.schedule.weekday.day == "MON-FRI"
    assert job.options.preserve_order is True
    assert [option.name for option in job.options.options] == ["target", "password", "since"]
    assert job.command_sequence.ordering_strategy == "step-first"
    assert job.command_sequence.continue_on_error is True
    assert len(job.command_sequence.commands) == 4
    assert job.command_sequence.commands[0].error_handler.script_interpreter.args_quoted is True
    assert job.command_sequence.global_log_filters[0].type == "key-value-data"
    assert job.notifications.on_failure.webhook.format == "json"
    assert job.notifications.on_success.plugin.type == "SlackNotification"
    assert job.notifications.on_start is None


def test_round_trip(record):
    job = job_from_flat(record)
    again = job_from_flat(job_to_flat(job))
    assert again == job


def test_round_trip_keeps_id(record):
    record["id"] = "abc-123"
    job = job_from_flat(record)
    assert job_from_flat(job_to_flat(job)).id == "abc-123"


def test_to_flat_full_record_matches_input(record):
    flat = job_to_flat(job_from_flat(record))
    assert flat["schedule"] == record["schedule"]
    assert [block["type"] for block in flat["notification"]] == ["on_success", "on_failure"]
    assert flat["option"][1]["storage_path"] == "keys/db/password"
    assert flat["command"][2]["job"][0]["node_filters"][0]["filter"] == "tags: db"
    assert "error_handler" not in flat["command"][1]


def test_minimal_record_defaults():
    job = job_from_flat({"name": "hello", "command": [{"shell_command": "echo hi"}]})
    assert job.execution_enabled is True
    assert job.schedule_enabled is True
    assert job.log_level == defaults.log_level
    assert job.dispatch == Dispatch()
    assert job.node_filter == NodeFilter()
    assert job.schedule is None
    assert job.options is None
    assert job.notifications is None
    assert job.command_sequence.ordering_strategy == "node-first"
    assert job.command_sequence.global_log_filters is None


def test_empty_schedule_is_no_schedule():
    assert job_from_flat({"name": "x", "schedule": ""}).schedule is None
    assert job_from_flat({"name": "x", "schedule": None}).schedule is None


@pytest.mark.parametrize(
    "key,value,error",
    [
        ("schedule", "0 0 12 15 1 MON *", InvalidScheduleFields),
        ("schedule", "* * * * *", MalformedSchedule),
        ("option", [{"name": "k", "storage_path": "/keys/k"}], OptionValidationError),
        ("command", [{"step_plugin": [{"type": "a"}, {"type": "b"}]}], TooManyBlocks),
    ],
)
def test_first_error_aborts(record, key, value, error):
    record[key] = value
    with pytest.raises(error):
        job_from_flat(record)


def test_errors_are_value_errors(record):
    record["notification"] = [{"type": "sometimes"}]
    with pytest.raises(TranslationError):
        job_from_flat(record)
    with pytest.raises(ValueError):
        job_from_flat(record)


def test_missing_dispatch_is_normalized():
    flat = job_to_flat(Job(name="legacy"))
    assert flat["max_thread_count"] == 1
    assert flat["continue_next_node_on_error"] is False
    assert flat["rank_attribute"] is None
    assert flat["rank_order"] == "ascending"


def test_missing_node_filter_is_unset():
    flat = job_to_flat(Job(name="legacy"))
    assert flat["node_filter_query"] is None
    assert flat["node_filter_exclude_query"] is None
    assert flat["node_filter_exclude_precedence"] is None
    assert job_from_flat(flat).node_filter == NodeFilter()


def test_project_name_only_written_when_present(record):
    job = job_from_flat(record)
    job.project_name = ""
    flat = job_to_flat(job, record)
    assert flat["project_name"] == "infrastructure"

    job.project_name = "other"
    assert job_to_flat(job, record)["project_name"] == "other"
    assert "project_name" not in job_to_flat(Job(name="x"))


def test_to_flat_does_not_change_state(record):
    state = copy.deepcopy(record)
    job = job_from_flat(record)
    job.name = "renamed"
    flat = job_to_flat(job, state)
    assert flat["name"] == "renamed"
    assert state == record


def test_schedule_kept_from_state_when_absent(record):
    job = job_from_flat(record)
    job.schedule = None
    assert job_to_flat(job, record)["schedule"] == record["schedule"]
    assert "schedule" not in job_to_flat(job)


def test_options_always_written():
    flat = job_to_flat(Job(name="x"))
    assert flat["option"] == []
    assert "preserve_options_order" not in flat
    assert flat["notification"] == []
