from dataclasses import dataclass, field
from typing import Dict, List, Optional

import rundeckjob.defaults as defaults

# The domain model of a job definition, as the remote job scheduler sees it.
# These are built fresh from the flat view on every write, and read back
# from whatever the remote returns.


@dataclass
class NodeFilter:
    query: str = ""
    exclude_query: str = ""
    exclude_precedence: bool = False


@dataclass
class Dispatch:
    """
    Execution fanout across nodes.
    """

    max_thread_count: int = defaults.max_thread_count
    continue_next_node_on_error: bool = False
    rank_attribute: Optional[str] = ""
    rank_order: str = defaults.rank_order
    success_on_empty_node_filter: bool = False


@dataclass
class ScheduleTime:
    seconds: str = ""
    minute: str = ""
    hour: str = ""


@dataclass
class ScheduleMonth:
    day: str = ""
    month: str = ""


@dataclass
class ScheduleWeekDay:
    day: str = ""


@dataclass
class ScheduleYear:
    year: str = ""


@dataclass
class Schedule:
    """
    A cron style schedule, grouped the way the remote system groups it.

    Day of month lives under month, and day of week is its own group.
    """

    time: ScheduleTime = field(default_factory=ScheduleTime)
    month: ScheduleMonth = field(default_factory=ScheduleMonth)
    weekday: ScheduleWeekDay = field(default_factory=ScheduleWeekDay)
    year: ScheduleYear = field(default_factory=ScheduleYear)


@dataclass
class ScriptInterpreter:
    invocation_string: str = ""
    args_quoted: bool = False


@dataclass
class JobReference:
    """
    A step that runs another job by name and group.
    """

    name: str = ""
    group_name: str = ""
    run_for_each_node: bool = False
    args: str = ""
    node_filter: Optional[NodeFilter] = None


@dataclass
class Plugin:
    type: str = ""
    config: Dict[str, str] = field(default_factory=dict)


@dataclass
class LogFilter:
    type: str = ""
    config: Dict[str, str] = field(default_factory=dict)


@dataclass
class Step:
    """
    Fields shared by a command and its error handler.

    Shell command, inline script and script file are not exclusive here,
    whatever is set is passed along.
    """

    description: str = ""
    shell_command: str = ""
    inline_script: str = ""
    script_file: str = ""
    script_file_args: str = ""
    keep_going_on_success: bool = False
    script_interpreter: Optional[ScriptInterpreter] = None
    job: Optional[JobReference] = None
    step_plugin: Optional[Plugin] = None
    node_step_plugin: Optional[Plugin] = None


@dataclass
class ErrorHandler(Step):
    """
    The command run when a step fails. It cannot have a handler of its own.
    """

    pass


@dataclass
class Command(Step):
    error_handler: Optional[ErrorHandler] = None


@dataclass
class CommandSequence:
    commands: List[Command] = field(default_factory=list)
    ordering_strategy: str = defaults.command_ordering_strategy
    continue_on_error: bool = False
    global_log_filters: Optional[List[LogFilter]] = None


@dataclass
class Option:
    name: str = ""
    label: str = ""
    default_value: str = ""
    value_choices: List[str] = field(default_factory=list)
    value_choices_url: str = ""
    require_predefined_choice: bool = False
    validation_regex: str = ""
    description: str = ""
    required: bool = False
    allow_multiple_values: bool = False
    multi_value_delimiter: str = ""
    obscure_input: bool = False
    exposed_to_scripts: bool = False
    storage_path: str = ""
    is_date: bool = False
    date_format: str = ""


@dataclass
class Options:
    options: List[Option] = field(default_factory=list)
    preserve_order: bool = False


@dataclass
class EmailNotification:
    recipients: List[str] = field(default_factory=list)
    subject: str = ""
    attach_log: bool = False


@dataclass
class WebHookNotification:
    urls: List[str] = field(default_factory=list)
    http_method: str = ""
    format: str = ""


@dataclass
class Notification:
    email: Optional[EmailNotification] = None
    webhook: Optional[WebHookNotification] = None
    plugin: Optional[Plugin] = None


@dataclass
class Notifications:
    """
    At most one notification per trigger type.
    """

    on_success: Optional[Notification] = None
    on_failure: Optional[Notification] = None
    on_start: Optional[Notification] = None

    def get(self, trigger):
        return getattr(self, trigger)

    def set(self, trigger, notification):
        setattr(self, trigger, notification)

    def items(self):
        """
        Yield populated (trigger, notification) pairs in a fixed order.
        """
        for trigger in defaults.notification_types:
            notification = self.get(trigger)
            if notification is not None:
                yield trigger, notification


@dataclass
class Job:
    """
    A job definition. The id is empty until the remote system assigns one.
    """

    name: str = ""
    group_name: str = ""
    project_name: str = ""
    description: str = ""
    id: str = ""
    execution_enabled: bool = defaults.execution_enabled
    timeout: str = ""
    schedule_enabled: bool = defaults.schedule_enabled
    time_zone: str = ""
    log_level: str = defaults.log_level
    allow_concurrent_executions: bool = False
    retry: str = ""
    dispatch: Optional[Dispatch] = None
    node_filter: Optional[NodeFilter] = None
    schedule: Optional[Schedule] = None
    command_sequence: Optional[CommandSequence] = None
    options: Optional[Options] = None
    notifications: Optional[Notifications] = None
