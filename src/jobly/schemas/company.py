from typing import Any

from pydantic import Field

from jobly.schemas import CamelModel
from jobly.schemas.job import JobRead


class CompanyCreate(CamelModel):
    handle: str = Field(..., min_length=1, max_length=25)
    name: str = Field(..., min_length=1)
    num_employees: int | None = Field(None, ge=0)
    description: str = ""
    logo_url: str | None = None


class CompanyRead(CamelModel):
    handle: str
    name: str
    num_employees: int | None
    description: str
    logo_url: str | None


class CompanyDetail(CompanyRead):
    jobs: list[JobRead] = []


class CompanyFilter(CamelModel):
    name: str | None = Field(None, min_length=1)
    min_employees: int | None = Field(None, ge=0)
    max_employees: int | None = Field(None, ge=0)

    def criteria(self) -> dict[str, Any]:
        return self.model_dump(exclude_none=True, by_alias=True)
