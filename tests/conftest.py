import copy

import pytest

from rundeckjob.remote import JobNotFound, JobService

full_record = {
    "name": "backup",
    "group_name": "ops/nightly",
    "project_name": "infrastructure",
    "description": "Nightly backup of the database hosts",
    "execution_enabled": True,
    "timeout": "2h",
    "schedule": "0 30 2 ? * MON-FRI *",
    "schedule_enabled": True,
    "time_zone": "America/New_York",
    "log_level": "DEBUG",
    "allow_concurrent_executions": False,
    "retry": "3",
    "max_thread_count": 4,
    "continue_on_error": True,
    "continue_next_node_on_error": True,
    "rank_order": "descending",
    "rank_attribute": "rank",
    "success_on_empty_node_filter": True,
    "preserve_options_order": True,
    "command_ordering_strategy": "step-first",
    "node_filter_query": "tags: db",
    "node_filter_exclude_query": "name: db-03",
    "node_filter_exclude_precedence": True,
    "global_log_filter": [
        {"type": "key-value-data", "config": {"regex": "^RUNDECK:DATA:(.+?)\\s*=\\s*(.+)$"}},
    ],
    "option": [
        {
            "name": "target",
            "label": "Target",
            "default_value": "primary",
            "value_choices": ["primary", "replica"],
            "require_predefined_choice": True,
            "description": "Which database to back up",
            "required": True,
        },
        {
            "name": "password",
            "obscure_input": True,
            "exposed_to_scripts": True,
            "storage_path": "keys/db/password",
        },
        {
            "name": "since",
            "is_date": True,
            "date_format": "MM/DD/YYYY hh:mm a",
        },
    ],
    "command": [
        {
            "description": "dump",
            "shell_command": "pg_dumpall > /backup/db.sql",
            "keep_going_on_success": True,
            "error_handler": [
                {
                    "description": "alert",
                    "inline_script": "echo failed | mail ops",
                    "script_interpreter": [{"invocation_string": "bash -c", "args_quoted": True}],
                }
            ],
        },
        {
            "script_file": "/opt/scripts/rotate.sh",
            "script_file_args": "--keep 7",
        },
        {
            "job": [
                {
                    "name": "verify",
                    "group_name": "ops",
                    "run_for_each_node": True,
                    "args": "-target ${option.target}",
                    "node_filters": [
                        {"filter": "tags: db", "exclude_filter": "", "exclude_precedence": False}
                    ],
                }
            ],
        },
        {
            "step_plugin": [{"type": "aws-s3-upload", "config": {"bucket": "backups"}}],
            "node_step_plugin": [{"type": "localexec", "config": {}}],
        },
    ],
    "notification": [
        {
            "type": "on_failure",
            "email": [{"recipients": ["ops@example.com"], "subject": "backup failed"}],
            "webhook_urls": ["https://hooks.example.com/backup"],
            "webhook_http_method": "post",
            "webhook_format": "json",
        },
        {
            "type": "on_success",
            "plugin": [{"type": "SlackNotification", "config": {"channel": "#ops"}}],
        },
    ],
}


@pytest.fixture
def record():
    return copy.deepcopy(full_record)


class MemoryService(JobService):
    """
    Keep jobs in a dict, assigning ids in order.
    """

    def __init__(self, **options):
        super().__init__(**options)
        self.jobs = {}
        self.counter = 0

    @property
    def name(self):
        return "memory"

    def get_job(self, job_id):
        if job_id not in self.jobs:
            raise JobNotFound(job_id)
        return copy.deepcopy(self.jobs[job_id])

    def create_job(self, job):
        self.counter += 1
        job = copy.deepcopy(job)
        job.id = f"job-{self.counter}"
        self.jobs[job.id] = job
        return job.id

    def update_job(self, job):
        if job.id not in self.jobs:
            raise JobNotFound(job.id)
        self.jobs[job.id] = copy.deepcopy(job)
        return job.id

    def delete_job(self, job_id):
        if job_id not in self.jobs:
            raise JobNotFound(job_id)
        del self.jobs[job_id]


@pytest.fixture
def service():
    return MemoryService()
