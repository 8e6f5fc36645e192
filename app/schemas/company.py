from pydantic import Field
from typing import List, Optional

from app.schemas.common import APIModel, APIRequest, PlainDecimal


class CompanyCreateRequest(APIRequest):
    """Schema for creating a new company"""
    handle: str = Field(..., min_length=1, max_length=25, pattern=r"^[a-z0-9-]+$")
    name: str = Field(..., min_length=1)
    description: str
    num_employees: Optional[int] = Field(None, ge=0)
    logo_url: Optional[str] = None


class CompanyUpdateRequest(APIRequest):
    """Schema for a partial company update (handle cannot change)"""
    name: Optional[str] = Field(None, min_length=1)
    description: Optional[str] = None
    num_employees: Optional[int] = Field(None, ge=0)
    logo_url: Optional[str] = None


class CompanyResponse(APIModel):
    handle: str
    name: str
    description: str
    num_employees: Optional[int] = None
    logo_url: Optional[str] = None


class CompanyJob(APIModel):
    """A job as listed under its company"""
    id: int
    title: str
    salary: Optional[int] = None
    equity: Optional[PlainDecimal] = None


class CompanyDetailResponse(CompanyResponse):
    jobs: List[CompanyJob]


class CompanyEnvelope(APIModel):
    company: CompanyResponse


class CompanyDetailEnvelope(APIModel):
    company: CompanyDetailResponse


class CompanyListResponse(APIModel):
    companies: List[CompanyResponse]
