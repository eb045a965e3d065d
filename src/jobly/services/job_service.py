import logging

from jobly.core.database import Database
from jobly.core.exceptions import NotFoundError
from jobly.helpers.sql import like_substring, sql_for_filtering, sql_for_partial_update
from jobly.schemas.job import JobCreate, JobFilter, JobRead, JobUpdate

logger = logging.getLogger(__name__)

JOB_COLUMNS = 'id, title, salary, equity, company_handle AS "companyHandle"'

# Filter key -> jobs column
FILTER_COLUMNS = {
    "title": "title",
    "minSalary": "salary",
    "hasEquity": "equity",
}

# Update field -> jobs column, for fields whose names differ
UPDATE_COLUMNS = {
    "companyHandle": "company_handle",
}


async def create_job(db: Database, data: JobCreate) -> JobRead:
    """Insert a job for an existing company.

    Raises:
        NotFoundError: ``data.company_handle`` names no company.
    """
    company = await db.query(
        "SELECT handle FROM companies WHERE handle = $1",
        [data.company_handle],
    )
    if not company:
        logger.info("Job not created, unknown company %s", data.company_handle)
        raise NotFoundError(f"Company does not exist: {data.company_handle}")

    rows = await db.query(
        f"""INSERT INTO jobs (title, salary, equity, company_handle)
            VALUES ($1, $2, $3, $4)
            RETURNING {JOB_COLUMNS}""",
        [data.title, data.salary, data.equity, data.company_handle],
    )
    job = JobRead.model_validate(rows[0])
    logger.info("Created job %s for %s", job.id, job.company_handle)
    return job


async def find_all_jobs(db: Database, filters: JobFilter | None = None) -> list[JobRead]:
    """Return all jobs, or those matching ``filters``, in insertion order.

    ``title`` matches anywhere in the job title; ``minSalary`` is inclusive;
    ``hasEquity=True`` keeps jobs with non-zero equity and ``False`` adds no
    constraint.
    """
    if filters is None:
        rows = await db.query(f"SELECT {JOB_COLUMNS} FROM jobs ORDER BY id")
        return [JobRead.model_validate(row) for row in rows]

    criteria = filters.criteria()
    if "title" in criteria:
        criteria["title"] = like_substring(criteria["title"])
    where = sql_for_filtering(criteria, FILTER_COLUMNS)

    rows = await db.query(
        f"SELECT {JOB_COLUMNS} FROM jobs {where.set_filters} ORDER BY id",
        where.values,
    )
    return [JobRead.model_validate(row) for row in rows]


async def get_job(db: Database, job_id: int) -> JobRead:
    rows = await db.query(f"SELECT {JOB_COLUMNS} FROM jobs WHERE id = $1", [job_id])
    if not rows:
        raise NotFoundError(f"No job with id: {job_id}")
    return JobRead.model_validate(rows[0])


async def update_job(db: Database, job_id: int, data: JobUpdate) -> JobRead:
    """Apply a partial update; fields left out of ``data`` keep their values.

    Raises:
        InvalidRequestError: ``data`` sets no field.
        NotFoundError: no job has ``job_id``.
    """
    update = sql_for_partial_update(data.changes(), UPDATE_COLUMNS)
    id_placeholder = f"${len(update.values) + 1}"

    rows = await db.query(
        f"""UPDATE jobs
            SET {update.set_cols}
            WHERE id = {id_placeholder}
            RETURNING {JOB_COLUMNS}""",
        [*update.values, job_id],
    )
    if not rows:
        raise NotFoundError(f"No job with id: {job_id}")
    return JobRead.model_validate(rows[0])


async def remove_job(db: Database, job_id: int) -> None:
    rows = await db.query("DELETE FROM jobs WHERE id = $1 RETURNING id", [job_id])
    if not rows:
        raise NotFoundError(f"No job with id: {job_id}")
    logger.info("Removed job %s", job_id)
