import logging

from jobly.core.database import Database
from jobly.core.exceptions import InvalidRequestError, NotFoundError
from jobly.helpers.sql import like_substring, sql_for_filtering
from jobly.schemas.company import CompanyCreate, CompanyDetail, CompanyFilter, CompanyRead
from jobly.schemas.job import JobRead
from jobly.services.job_service import JOB_COLUMNS

logger = logging.getLogger(__name__)

COMPANY_COLUMNS = (
    'handle, name, num_employees AS "numEmployees", description, logo_url AS "logoUrl"'
)

# Filter key -> companies column
FILTER_COLUMNS = {
    "name": "name",
    "minEmployees": "num_employees",
    "maxEmployees": "num_employees",
}


async def create_company(db: Database, data: CompanyCreate) -> CompanyRead:
    duplicate = await db.query("SELECT handle FROM companies WHERE handle = $1", [data.handle])
    if duplicate:
        raise InvalidRequestError(f"Duplicate company: {data.handle}")

    rows = await db.query(
        f"""INSERT INTO companies (handle, name, num_employees, description, logo_url)
            VALUES ($1, $2, $3, $4, $5)
            RETURNING {COMPANY_COLUMNS}""",
        [data.handle, data.name, data.num_employees, data.description, data.logo_url],
    )
    logger.info("Created company %s", data.handle)
    return CompanyRead.model_validate(rows[0])


async def find_all_companies(
    db: Database, filters: CompanyFilter | None = None
) -> list[CompanyRead]:
    """Return companies ordered by name, optionally filtered.

    ``name`` matches anywhere in the company name; employee bounds are
    inclusive.
    """
    if filters is None:
        rows = await db.query(f"SELECT {COMPANY_COLUMNS} FROM companies ORDER BY name")
        return [CompanyRead.model_validate(row) for row in rows]

    criteria = filters.criteria()
    if "name" in criteria:
        criteria["name"] = like_substring(criteria["name"])
    where = sql_for_filtering(criteria, FILTER_COLUMNS)

    rows = await db.query(
        f"SELECT {COMPANY_COLUMNS} FROM companies {where.set_filters} ORDER BY name",
        where.values,
    )
    return [CompanyRead.model_validate(row) for row in rows]


async def get_company(db: Database, handle: str) -> CompanyDetail:
    rows = await db.query(f"SELECT {COMPANY_COLUMNS} FROM companies WHERE handle = $1", [handle])
    if not rows:
        raise NotFoundError(f"No company: {handle}")

    job_rows = await db.query(
        f"SELECT {JOB_COLUMNS} FROM jobs WHERE company_handle = $1 ORDER BY id",
        [handle],
    )
    return CompanyDetail(
        **CompanyRead.model_validate(rows[0]).model_dump(),
        jobs=[JobRead.model_validate(row) for row in job_rows],
    )
