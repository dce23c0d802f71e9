from rundeckjob import schema
from rundeckjob.logger import logger
from rundeckjob.translate import job_from_flat, job_to_flat

# These mirror the lifecycle of a job resource. Each takes the current flat
# record and returns a new one; the record passed in is not changed.


def create(service, flat, validate=True):
    """
    Assemble a job from a flat record and create it.

    Nothing is sent when the record does not translate.
    """
    job = assemble(flat, validate)
    job_id = service.create_job(job)
    logger.debug(f"created job {job.name} with id {job_id}")
    return read(service, dict(flat, id=job_id))


def update(service, flat, validate=True):
    job = assemble(flat, validate)
    job_id = service.update_job(job)
    logger.debug(f"updated job {job.name} with id {job_id}")
    return read(service, dict(flat, id=job_id))


def read(service, flat):
    """
    Refresh a flat record from the remote job with the same id.
    """
    job = service.get_job(flat["id"])
    logger.debug(f"read job {flat['id']}")
    return job_to_flat(job, flat)


def delete(service, flat):
    service.delete_job(flat["id"])
    logger.debug(f"deleted job {flat['id']}")
    return dict(flat, id="")


def lookup(service, job_id):
    """
    Read only lookup of a job by id, starting from an empty record.
    """
    job = service.get_job(job_id)
    return job_to_flat(job)


def assemble(flat, validate=True):
    if validate:
        schema.validate_job(flat)
    return job_from_flat(flat)
