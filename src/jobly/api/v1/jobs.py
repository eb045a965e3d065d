from fastapi import APIRouter, Depends, Query, status

from jobly.api.deps import get_db
from jobly.core.database import Database
from jobly.schemas.job import JobCreate, JobFilter, JobRead, JobUpdate
from jobly.services import job_service

router = APIRouter(prefix="/jobs", tags=["jobs"])


@router.post("/", response_model=JobRead, status_code=status.HTTP_201_CREATED)
async def create_job(
    data: JobCreate,
    db: Database = Depends(get_db),
) -> JobRead:
    return await job_service.create_job(db, data)


@router.get("/", response_model=list[JobRead])
async def list_jobs(
    title: str | None = Query(None, min_length=1),
    min_salary: int | None = Query(None, alias="minSalary", ge=0),
    has_equity: bool | None = Query(None, alias="hasEquity"),
    db: Database = Depends(get_db),
) -> list[JobRead]:
    filters = JobFilter(title=title, min_salary=min_salary, has_equity=has_equity)
    if not filters.criteria():
        return await job_service.find_all_jobs(db)
    return await job_service.find_all_jobs(db, filters)


@router.get("/{job_id}", response_model=JobRead)
async def get_job(
    job_id: int,
    db: Database = Depends(get_db),
) -> JobRead:
    return await job_service.get_job(db, job_id)


@router.patch("/{job_id}", response_model=JobRead)
async def update_job(
    job_id: int,
    data: JobUpdate,
    db: Database = Depends(get_db),
) -> JobRead:
    return await job_service.update_job(db, job_id, data)


@router.delete("/{job_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_job(
    job_id: int,
    db: Database = Depends(get_db),
) -> None:
    await job_service.remove_job(db, job_id)
