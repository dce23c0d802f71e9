from rundeckjob.errors import TooManyBlocks
from rundeckjob.types import (
    Command,
    ErrorHandler,
    JobReference,
    LogFilter,
    NodeFilter,
    Plugin,
    ScriptInterpreter,
)

# Scalar keys of a step, the same for commands and error handlers
step_strings = [
    "description",
    "shell_command",
    "inline_script",
    "script_file",
    "script_file_args",
]


def single_block(record, key, parent="command"):
    """
    Get the one entry of a list that stands in for an optional value.

    An absent key or empty list is None, and more than one entry is an error.
    """
    entries = record.get(key) or []
    if len(entries) > 1:
        raise TooManyBlocks(key, parent)
    if not entries:
        return None
    return entries[0]


def from_flat(record):
    """
    Build a Command from a flat command record.

    The error handler is decoded with error_handler_from_flat, which reads
    the error handler shape and never looks for a handler of its own.
    """
    command = step_from_flat(record, Command)
    handler = single_block(record, "error_handler")
    if handler is not None:
        command.error_handler = error_handler_from_flat(handler)
    return command


def error_handler_from_flat(record):
    return step_from_flat(record, ErrorHandler)


def step_from_flat(record, cls):
    """
    Decode the fields shared by commands and error handlers into cls.
    """
    step = cls(keep_going_on_success=bool(record.get("keep_going_on_success", False)))
    for key in step_strings:
        setattr(step, key, record.get(key) or "")

    interpreter = single_block(record, "script_interpreter")
    if interpreter is not None:
        step.script_interpreter = ScriptInterpreter(
            invocation_string=interpreter.get("invocation_string") or "",
            args_quoted=bool(interpreter.get("args_quoted", False)),
        )

    step.job = job_reference_from_flat(single_block(record, "job"))
    step.step_plugin = plugin_from_flat(single_block(record, "step_plugin"))
    step.node_step_plugin = plugin_from_flat(single_block(record, "node_step_plugin"))
    return step


def job_reference_from_flat(record):
    if record is None:
        return None
    reference = JobReference(
        name=record.get("name") or "",
        group_name=record.get("group_name") or "",
        run_for_each_node=bool(record.get("run_for_each_node", False)),
        args=record.get("args") or "",
    )
    node_filter = single_block(record, "node_filters", parent="command job reference")
    if node_filter is not None:
        reference.node_filter = NodeFilter(
            query=node_filter.get("filter") or "",
            exclude_query=node_filter.get("exclude_filter") or "",
            exclude_precedence=bool(node_filter.get("exclude_precedence", False)),
        )
    return reference


def plugin_from_flat(record):
    if record is None:
        return None
    return Plugin(type=record.get("type") or "", config=dict(record.get("config") or {}))


def log_filters_from_flat(records):
    """
    Global log filters, or None when there are none.
    """
    if not records:
        return None
    return [
        LogFilter(type=record.get("type") or "", config=dict(record.get("config") or {}))
        for record in records
    ]


def to_flat(command):
    """
    Copy a Command back to a flat record.

    Optional fields that are set become a list of one, and unset ones
    are left out entirely (not an empty list).
    """
    record = step_to_flat(command)
    if command.error_handler is not None:
        record["error_handler"] = [error_handler_to_flat(command.error_handler)]
    return record


def error_handler_to_flat(handler):
    return step_to_flat(handler)


def step_to_flat(step):
    record = {key: getattr(step, key) for key in step_strings}
    record["keep_going_on_success"] = step.keep_going_on_success

    if step.script_interpreter is not None:
        record["script_interpreter"] = [
            {
                "invocation_string": step.script_interpreter.invocation_string,
                "args_quoted": step.script_interpreter.args_quoted,
            }
        ]

    if step.job is not None:
        reference = {
            "name": step.job.name,
            "group_name": step.job.group_name,
            "run_for_each_node": step.job.run_for_each_node,
            "args": step.job.args,
        }
        if step.job.node_filter is not None:
            reference["node_filters"] = [
                {
                    "filter": step.job.node_filter.query,
                    "exclude_filter": step.job.node_filter.exclude_query,
                    "exclude_precedence": step.job.node_filter.exclude_precedence,
                }
            ]
        record["job"] = [reference]

    for key in ["step_plugin", "node_step_plugin"]:
        plugin = getattr(step, key)
        if plugin is not None:
            record[key] = [plugin_to_flat(plugin)]
    return record


def plugin_to_flat(plugin):
    return {"type": plugin.type, "config": dict(plugin.config)}


def log_filters_to_flat(log_filters):
    return [{"type": item.type, "config": dict(item.config)} for item in log_filters or []]
