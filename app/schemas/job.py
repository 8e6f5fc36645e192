from pydantic import Field
from typing import List, Optional

from app.schemas.common import APIModel, APIRequest, PlainDecimal
from app.schemas.company import CompanyResponse


class JobCreateRequest(APIRequest):
    """Schema for creating a new job"""
    title: str = Field(..., min_length=1)
    salary: Optional[int] = Field(None, ge=0)
    equity: Optional[float] = Field(None, ge=0, le=1.0)
    company_handle: str = Field(..., min_length=1, max_length=25)


class JobUpdateRequest(APIRequest):
    """
    Schema for a partial job update.

    id and companyHandle are fixed once a job exists, so they are not
    accepted here.
    """
    title: Optional[str] = Field(None, min_length=1)
    salary: Optional[int] = Field(None, ge=0)
    equity: Optional[float] = Field(None, ge=0, le=1.0)


class JobResponse(APIModel):
    """Schema for a job record"""
    id: int
    title: str
    salary: Optional[int] = None
    equity: Optional[PlainDecimal] = None
    company_handle: str


class JobDetailResponse(APIModel):
    """Schema for a single job with its company"""
    id: int
    title: str
    salary: Optional[int] = None
    equity: Optional[PlainDecimal] = None
    company: CompanyResponse


class JobEnvelope(APIModel):
    job: JobResponse


class JobDetailEnvelope(APIModel):
    job: JobDetailResponse


class JobListResponse(APIModel):
    jobs: List[JobResponse]
