from .job import from_flat as job_from_flat
from .job import to_flat as job_to_flat
