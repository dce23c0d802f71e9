import copy

import jsonschema

# Lists that stand in for a single optional value (script_interpreter, job,
# the plugins, error_handler) have no maxItems here. The translator checks
# their length so the error can name the block.

plugin = {
    "type": "object",
    "properties": {
        "type": {"type": "string"},
        "config": {"type": "object", "additionalProperties": {"type": "string"}},
    },
    "required": ["type"],
    "additionalProperties": False,
}

node_filter = {
    "type": "object",
    "properties": {
        "filter": {"type": "string"},
        "exclude_filter": {"type": "string"},
        "exclude_precedence": {"type": "boolean", "default": False},
    },
    "additionalProperties": False,
}

# The error handler is a command without an error_handler of its own,
# there is no recursion in the flat view.
error_handler = {
    "type": "object",
    "properties": {
        "description": {"type": "string"},
        "shell_command": {"type": "string"},
        "inline_script": {"type": "string"},
        "script_file": {"type": "string"},
        "script_file_args": {"type": "string"},
        "keep_going_on_success": {"type": "boolean", "default": False},
        "script_interpreter": {
            "type": "array",
            "items": {
                "type": "object",
                "properties": {
                    "invocation_string": {"type": "string"},
                    "args_quoted": {"type": "boolean", "default": False},
                },
                "additionalProperties": False,
            },
        },
        "job": {
            "type": "array",
            "items": {
                "type": "object",
                "properties": {
                    "name": {"type": "string"},
                    "group_name": {"type": "string"},
                    "run_for_each_node": {"type": "boolean", "default": False},
                    "args": {"type": "string"},
                    "node_filters": {"type": "array", "items": node_filter},
                },
                "required": ["name"],
                "additionalProperties": False,
            },
        },
        "step_plugin": {"type": "array", "items": plugin},
        "node_step_plugin": {"type": "array", "items": plugin},
    },
    "additionalProperties": False,
}

command = copy.deepcopy(error_handler)
command["properties"]["error_handler"] = {"type": "array", "items": error_handler}

option = {
    "type": "object",
    "properties": {
        "name": {"type": "string"},
        "label": {"type": "string"},
        "default_value": {"type": "string"},
        # Null choices are let through, the option translator reports them
        "value_choices": {"type": "array", "items": {"type": ["string", "null"]}},
        "value_choices_url": {"type": "string"},
        "require_predefined_choice": {"type": "boolean"},
        "validation_regex": {"type": "string"},
        "description": {"type": "string"},
        "required": {"type": "boolean"},
        "allow_multiple_values": {"type": "boolean"},
        "multi_value_delimiter": {"type": "string"},
        "obscure_input": {"type": "boolean"},
        "exposed_to_scripts": {"type": "boolean"},
        "storage_path": {"type": "string"},
        "is_date": {"type": "boolean"},
        "date_format": {"type": "string", "description": "Example: 'MM/DD/YYYY hh:mm a'"},
    },
    "required": ["name"],
    "additionalProperties": False,
}

notification = {
    "type": "object",
    "properties": {
        # One of on_success, on_failure, on_start (checked by the translator)
        "type": {"type": "string"},
        "email": {
            "type": "array",
            "items": {
                "type": "object",
                "properties": {
                    "attach_log": {"type": "boolean", "default": False},
                    "recipients": {"type": "array", "items": {"type": "string"}},
                    "subject": {"type": "string"},
                },
                "required": ["recipients"],
                "additionalProperties": False,
            },
        },
        "webhook_urls": {"type": "array", "items": {"type": "string"}},
        "webhook_http_method": {"type": "string"},
        "webhook_format": {"type": "string"},
        "plugin": {"type": "array", "items": plugin},
    },
    "required": ["type"],
    "additionalProperties": False,
}

optional_string = {"type": ["string", "null"]}

job = {
    "type": "object",
    "properties": {
        "id": {"type": "string"},
        "name": {"type": "string"},
        "group_name": {"type": "string"},
        "project_name": {"type": "string"},
        "description": {"type": "string"},
        "execution_enabled": {"type": "boolean", "default": True},
        "timeout": {"type": "string"},
        "schedule": {"type": "string"},
        "schedule_enabled": {"type": "boolean", "default": True},
        "time_zone": {"type": "string"},
        "log_level": {"type": "string", "default": "INFO"},
        "allow_concurrent_executions": {"type": "boolean"},
        "retry": {"type": "string"},
        "max_thread_count": {"type": "integer", "default": 1},
        "continue_on_error": {"type": "boolean"},
        "continue_next_node_on_error": {"type": "boolean"},
        "rank_order": {"type": "string", "default": "ascending"},
        "rank_attribute": optional_string,
        "success_on_empty_node_filter": {"type": "boolean"},
        "preserve_options_order": {"type": "boolean"},
        "command_ordering_strategy": {"type": "string", "default": "node-first"},
        "node_filter_query": optional_string,
        "node_filter_exclude_query": optional_string,
        "node_filter_exclude_precedence": {"type": ["boolean", "null"]},
        "notification": {"type": "array", "items": notification},
        "option": {"type": "array", "items": option},
        "global_log_filter": {"type": "array", "items": plugin},
        "command": {"type": "array", "items": command},
    },
    "required": ["name"],
    "additionalProperties": False,
}

rundeck_job_config_schema = {
    "$schema": "http://json-schema.org/draft-07/schema#",
    "title": "rundeck-job-01",
    "description": "Rundeck Job Python Config",
    "type": "object",
    "required": ["jobs"],
    "properties": {
        "jobs": {"type": "array", "items": job},
        "logging": {
            "type": "object",
            "properties": {
                "debug": {"type": "boolean", "default": False},
            },
            "additionalProperties": False,
        },
    },
    "additionalProperties": False,
}


def validate_job(record):
    """
    Validate a single flat job record. Raises jsonschema.ValidationError.
    """
    jsonschema.validate(record, schema=job)


def validate_command(record):
    jsonschema.validate(record, schema=command)


def validate_error_handler(record):
    jsonschema.validate(record, schema=error_handler)
