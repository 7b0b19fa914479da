from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator

# Decimal in [0, 1]: "0", "1", "0.5", ".5", "1.0", "1.000"
EQUITY_PATTERN = r"^(0(\.[0-9]+)?|\.[0-9]+|1(\.0+)?)$"

# Upper bound of the INTEGER columns behind ids and salaries
MAX_INT = 2**31 - 1


class JobCreate(BaseModel):
    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    title: str = Field(min_length=1)
    salary: Optional[int] = Field(default=None, ge=0, le=MAX_INT)
    equity: Optional[str] = Field(default=None, pattern=EQUITY_PATTERN)
    company_handle: str = Field(alias="companyHandle", min_length=1, max_length=25)


class JobUpdate(BaseModel):
    """
    Partial update payload. Only keys the client actually sent are applied,
    so read it with ``model_dump(exclude_unset=True)``.
    """
    model_config = ConfigDict(extra="forbid")

    # title may be omitted but never nulled
    title: str = Field(default=None, min_length=1)
    salary: Optional[int] = Field(default=None, ge=0, le=MAX_INT)
    equity: Optional[str] = Field(default=None, pattern=EQUITY_PATTERN)


class JobFilter(BaseModel):
    """Query string filters for GET /jobs."""
    model_config = ConfigDict(extra="forbid")

    title: Optional[str] = Field(default=None, min_length=1)
    minSalary: Optional[int] = Field(default=None, ge=0, le=MAX_INT)
    hasEquity: Optional[bool] = None

    @field_validator("hasEquity", mode="before")
    @classmethod
    def coerce_has_equity(cls, value):
        # Only the literal "true" switches the equity filter on
        if value is None or isinstance(value, bool):
            return value
        return str(value) == "true"


class JobResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: int
    title: str
    salary: Optional[int] = None
    equity: Optional[str] = None
    company_handle: str = Field(alias="companyHandle")


class JobEnvelope(BaseModel):
    job: JobResponse


class JobListEnvelope(BaseModel):
    jobs: List[JobResponse]


class DeletedResponse(BaseModel):
    deleted: int
