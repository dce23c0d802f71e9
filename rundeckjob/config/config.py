import jsonschema

import rundeckjob.utils as utils
from rundeckjob import schema
from rundeckjob.translate import job_from_flat


def load_config(config_path):
    """
    Load the config path, validating with the schema
    """
    cfg = utils.read_yaml(config_path)
    jsonschema.validate(cfg, schema=schema.rundeck_job_config_schema)
    return JobConfig(cfg)


class JobConfig:
    """
    A job config holds flat job records loaded from yaml, keyed by name.

    Jobs are only assembled (and checked beyond the schema) when asked for.
    """

    def __init__(self, cfg):
        self._cfg = cfg
        self.jobs = {}
        self.parse()

    @property
    def debug_logging(self):
        return self._cfg.get("logging", {}).get("debug") is True

    def parse(self):
        """
        Group flat records by job name. A name can be used in more than
        one group, so each name holds a list.
        """
        for record in self._cfg["jobs"]:
            if record["name"] not in self.jobs:
                self.jobs[record["name"]] = []
            self.jobs[record["name"]].append(record)

    def pretty_job(self, name):
        """
        Pretty print a job (for the logger) across a single line
        """
        if name not in self.jobs:
            raise ValueError(f'job with name "{name}" is not known')
        return utils.pretty_print_list(self.jobs[name])

    def iter_records(self, name=None):
        """
        Yield flat job records by name (or not)
        """
        if not name:
            names = list(self.jobs)
        else:
            if name not in self.jobs:
                raise ValueError(f'job with name "{name}" is not known')
            names = [name]
        for name in names:
            for record in self.jobs[name]:
                yield record

    def iter_jobs(self, name=None):
        """
        Yield assembled jobs. The first invalid record raises.
        """
        for record in self.iter_records(name):
            yield job_from_flat(record)
