# Flat attribute defaults, as the provider schema declares them
log_level = "INFO"
execution_enabled = True
schedule_enabled = True
max_thread_count = 1
rank_order = "ascending"
command_ordering_strategy = "node-first"

# The remote system may omit dispatch on read, these are what we assume
dispatch_defaults = {
    "max_thread_count": 1,
    "continue_next_node_on_error": False,
    "rank_attribute": None,
    "rank_order": "ascending",
    "success_on_empty_node_filter": False,
}

# Trigger types, in the order notifications are written back
notification_types = ["on_success", "on_failure", "on_start"]

# Sub-blocks of a command that are lists with at most one entry
command_blocks = [
    "script_interpreter",
    "job",
    "step_plugin",
    "node_step_plugin",
    "error_handler",
]

# Number of fields in a schedule, seconds through year
schedule_fields = 7
schedule_help = (
    "http://www.quartz-scheduler.org/documentation/quartz-2.2.x/tutorials/tutorial-lesson-06.html"
)
