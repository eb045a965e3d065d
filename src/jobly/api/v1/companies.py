from fastapi import APIRouter, Depends, Query, status

from jobly.api.deps import get_db
from jobly.core.database import Database
from jobly.schemas.company import CompanyCreate, CompanyDetail, CompanyFilter, CompanyRead
from jobly.services import company_service

router = APIRouter(prefix="/companies", tags=["companies"])


@router.post("/", response_model=CompanyRead, status_code=status.HTTP_201_CREATED)
async def create_company(
    data: CompanyCreate,
    db: Database = Depends(get_db),
) -> CompanyRead:
    return await company_service.create_company(db, data)


@router.get("/", response_model=list[CompanyRead])
async def list_companies(
    name: str | None = Query(None, min_length=1),
    min_employees: int | None = Query(None, alias="minEmployees", ge=0),
    max_employees: int | None = Query(None, alias="maxEmployees", ge=0),
    db: Database = Depends(get_db),
) -> list[CompanyRead]:
    filters = CompanyFilter(name=name, min_employees=min_employees, max_employees=max_employees)
    if not filters.criteria():
        return await company_service.find_all_companies(db)
    return await company_service.find_all_companies(db, filters)


@router.get("/{handle}", response_model=CompanyDetail)
async def get_company(
    handle: str,
    db: Database = Depends(get_db),
) -> CompanyDetail:
    return await company_service.get_company(db, handle)
