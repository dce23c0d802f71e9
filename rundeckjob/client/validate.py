import jsonschema

from rundeckjob.config import load_config
from rundeckjob.errors import TranslationError
from rundeckjob.logger import LogColors, color, setup_logger
from rundeckjob.translate import job_from_flat


def main(args, parser, extra):
    """
    Translate every job in the config, stopping at the first failure.
    """
    try:
        cfg = load_config(args.config)
    except jsonschema.ValidationError as e:
        print(color(f"{args.config} is not a valid config: {e.message}", LogColors.RED))
        return 1

    if cfg.debug_logging:
        setup_logger(True)

    for record in cfg.iter_records():
        prefix = color(record["name"].ljust(20), LogColors.OKBLUE)
        try:
            job = job_from_flat(record)
        except TranslationError as e:
            print(prefix + color(str(e), LogColors.RED))
            return 1
        steps = len(job.command_sequence.commands)
        print(prefix + color(f"OK ({steps} steps)", LogColors.OKGREEN))
    return 0
