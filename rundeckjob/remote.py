class JobNotFound(Exception):
    """
    The remote has no job with the requested id.
    """

    def __init__(self, job_id):
        self.job_id = job_id
        super().__init__(f"job {job_id} was not found")


class TransportError(Exception):
    """
    Talking to the remote failed. Retries and timeouts are the service's job.
    """

    pass


class JobService:
    """
    The JobService is an abstract base for talking to a remote job scheduler.

    Nothing in the translators calls it; the resource functions hand it an
    assembled Job and read Jobs back from it.
    """

    def __init__(self, **options):
        for key, value in options.items():
            setattr(self, key, value)

    @property
    def name(self):
        raise NotImplementedError

    def get_job(self, job_id):
        """
        Return the Job for an id, or raise JobNotFound
        """
        raise NotImplementedError

    def create_job(self, job):
        """
        Create a job, returning the id the remote assigned
        """
        raise NotImplementedError

    def update_job(self, job):
        """
        Update a job in place, returning its id
        """
        raise NotImplementedError

    def delete_job(self, job_id):
        raise NotImplementedError
