import rundeckjob.utils as utils
from rundeckjob.config import load_config
from rundeckjob.translate import job_from_flat, job_to_flat


def main(args, parser, extra):
    """
    Print each job as the flat record it reads back as.
    """
    cfg = load_config(args.config)
    records = []
    for record in cfg.iter_records(args.job):
        records.append(job_to_flat(job_from_flat(record), record))
    print(utils.dump_yaml({"jobs": records}), end="")
    return 0
