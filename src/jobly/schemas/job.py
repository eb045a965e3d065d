from decimal import Decimal
from typing import Any

from pydantic import ConfigDict, Field, field_validator

from jobly.schemas import CamelModel


class JobCreate(CamelModel):
    title: str = Field(..., min_length=1)
    salary: int | None = Field(None, ge=0)
    equity: Decimal | None = Field(None, ge=0, le=1)
    company_handle: str = Field(..., min_length=1, max_length=25)


class JobUpdate(CamelModel):
    """Sparse update: only the fields that were explicitly set are written."""

    model_config = ConfigDict(extra="forbid")

    title: str | None = Field(None, min_length=1)
    salary: int | None = Field(None, ge=0)
    equity: Decimal | None = Field(None, ge=0, le=1)
    company_handle: str | None = Field(None, min_length=1, max_length=25)

    @field_validator("title", "company_handle")
    @classmethod
    def _not_nullable(cls, value: str | None) -> str:
        if value is None:
            raise ValueError("cannot be cleared")
        return value

    def changes(self) -> dict[str, Any]:
        return self.model_dump(exclude_unset=True, by_alias=True)


class JobRead(CamelModel):
    id: int
    title: str
    salary: int | None
    equity: str | None
    company_handle: str

    @field_validator("equity", mode="before")
    @classmethod
    def _equity_as_text(cls, value: Any) -> Any:
        # NUMERIC comes back from asyncpg as Decimal
        if isinstance(value, Decimal | int | float):
            return str(value)
        return value


class JobFilter(CamelModel):
    title: str | None = Field(None, min_length=1)
    min_salary: int | None = Field(None, ge=0)
    has_equity: bool | None = None

    def criteria(self) -> dict[str, Any]:
        return self.model_dump(exclude_none=True, by_alias=True)
