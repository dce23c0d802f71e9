import rundeckjob.defaults as defaults
import rundeckjob.translate.commands as commands
import rundeckjob.translate.notifications as notifications
import rundeckjob.translate.options as options
import rundeckjob.translate.schedule as schedule
from rundeckjob.logger import logger
from rundeckjob.types import CommandSequence, Dispatch, Job, NodeFilter


def get(record, key, default=None):
    """
    Get a flat attribute, treating an explicit None as unset.
    """
    value = record.get(key)
    if value is None:
        return default
    return value


def from_flat(record):
    """
    Assemble a Job from a flat job record.

    The first error from any translator is raised, and no partial job
    is returned. Dispatch and node filter are always set on write.
    """
    job = Job(
        id=get(record, "id", ""),
        name=get(record, "name", ""),
        group_name=get(record, "group_name", ""),
        project_name=get(record, "project_name", ""),
        description=get(record, "description", ""),
        execution_enabled=bool(get(record, "execution_enabled", defaults.execution_enabled)),
        timeout=get(record, "timeout", ""),
        schedule_enabled=bool(get(record, "schedule_enabled", defaults.schedule_enabled)),
        time_zone=get(record, "time_zone", ""),
        log_level=get(record, "log_level", defaults.log_level),
        allow_concurrent_executions=bool(get(record, "allow_concurrent_executions", False)),
        retry=get(record, "retry", ""),
    )
    job.dispatch = Dispatch(
        max_thread_count=int(get(record, "max_thread_count", defaults.max_thread_count)),
        continue_next_node_on_error=bool(get(record, "continue_next_node_on_error", False)),
        rank_attribute=get(record, "rank_attribute", ""),
        rank_order=get(record, "rank_order", defaults.rank_order),
        success_on_empty_node_filter=bool(get(record, "success_on_empty_node_filter", False)),
    )

    # Query fields stay empty when unset
    job.node_filter = NodeFilter(
        query=get(record, "node_filter_query", ""),
        exclude_query=get(record, "node_filter_exclude_query", ""),
        exclude_precedence=bool(get(record, "node_filter_exclude_precedence", False)),
    )

    # An empty schedule means no schedule, not a parse error
    cron = get(record, "schedule", "")
    if cron:
        job.schedule = schedule.decode(cron)

    option_records = get(record, "option", [])
    if option_records:
        job.options = options.from_flat(
            option_records, get(record, "preserve_options_order", False)
        )

    job.command_sequence = CommandSequence(
        ordering_strategy=get(
            record, "command_ordering_strategy", defaults.command_ordering_strategy
        ),
        continue_on_error=bool(get(record, "continue_on_error", False)),
        global_log_filters=commands.log_filters_from_flat(get(record, "global_log_filter", [])),
    )
    for command in get(record, "command", []):
        job.command_sequence.commands.append(commands.from_flat(command))

    blocks = get(record, "notification", [])
    if blocks:
        job.notifications = notifications.from_flat(blocks)
    return job


def to_flat(job, state=None):
    """
    Write a Job back onto a flat record, returning a new record.

    state is the current flat record (if any). Keys the remote does not
    reliably return (project name, schedule) keep their value from it.
    """
    flat = dict(state or {})
    flat["id"] = job.id
    for key in [
        "name",
        "group_name",
        "description",
        "execution_enabled",
        "timeout",
        "schedule_enabled",
        "time_zone",
        "log_level",
        "allow_concurrent_executions",
        "retry",
    ]:
        flat[key] = getattr(job, key)

    normalize_project(flat, job.project_name)
    normalize_dispatch(flat, job.dispatch)

    if job.node_filter is not None:
        flat["node_filter_query"] = job.node_filter.query
        flat["node_filter_exclude_query"] = job.node_filter.exclude_query
        flat["node_filter_exclude_precedence"] = job.node_filter.exclude_precedence
    else:
        flat["node_filter_query"] = None
        flat["node_filter_exclude_query"] = None
        flat["node_filter_exclude_precedence"] = None

    flat["option"] = []
    if job.options is not None:
        flat["preserve_options_order"] = job.options.preserve_order
        flat["option"] = options.to_flat(job.options)

    if job.command_sequence is not None:
        sequence = job.command_sequence
        flat["command_ordering_strategy"] = sequence.ordering_strategy
        flat["continue_on_error"] = sequence.continue_on_error
        if sequence.global_log_filters:
            flat["global_log_filter"] = commands.log_filters_to_flat(sequence.global_log_filters)
        flat["command"] = [commands.to_flat(command) for command in sequence.commands]

    if job.schedule is not None:
        flat["schedule"] = schedule.encode(job.schedule)

    flat["notification"] = []
    if job.notifications is not None:
        flat["notification"] = notifications.to_flat(job.notifications)
    return flat


def normalize_project(flat, project_name):
    """
    The project name is not returned by every version of the remote, and
    jobs cannot move between projects, so only write it when we have it.
    """
    if project_name:
        flat["project_name"] = project_name
    else:
        logger.debug("job has no project name, keeping the current value")


def normalize_dispatch(flat, dispatch):
    """
    Write dispatch settings, using fixed defaults when the job has none.
    """
    if dispatch is None:
        logger.debug("job has no dispatch settings, using defaults")
        flat.update(defaults.dispatch_defaults)
        return
    flat["max_thread_count"] = dispatch.max_thread_count
    flat["continue_next_node_on_error"] = dispatch.continue_next_node_on_error
    flat["rank_attribute"] = dispatch.rank_attribute
    flat["rank_order"] = dispatch.rank_order
    flat["success_on_empty_node_filter"] = dispatch.success_on_empty_node_filter
