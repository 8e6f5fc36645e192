import logging
from typing import Any, Dict, Optional
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.core.deps import get_admin_user
from app.crud import company as company_crud
from app.schemas.common import DeletedResponse
from app.schemas.company import (
    CompanyCreateRequest,
    CompanyDetailEnvelope,
    CompanyEnvelope,
    CompanyListResponse,
    CompanyUpdateRequest,
)

router = APIRouter(prefix="/companies", tags=["Companies"])
logger = logging.getLogger(__name__)


@router.post("/", status_code=201, response_model=CompanyEnvelope)
def create_company(
    request: CompanyCreateRequest,
    db: Session = Depends(get_db),
    admin_user: Dict[str, Any] = Depends(get_admin_user)
):
    """Create a company. Admin only."""
    company = company_crud.create(db, request)
    logger.info(f"Admin {admin_user['username']} created company {company['handle']}")
    return {"company": company}


@router.get("/", response_model=CompanyListResponse)
def list_companies(
    name_like: Optional[str] = Query(None, alias="nameLike"),
    min_employees: Optional[int] = Query(None, alias="minEmployees", ge=0),
    max_employees: Optional[int] = Query(None, alias="maxEmployees", ge=0),
    db: Session = Depends(get_db)
):
    """
    List companies ordered by name.

    Args:
        nameLike: Case-insensitive name substring
        minEmployees: Minimum employee count
        maxEmployees: Maximum employee count (400 if below minEmployees)
    """
    companies = company_crud.find_all(
        db,
        name_like=name_like,
        min_employees=min_employees,
        max_employees=max_employees,
    )
    return {"companies": companies}


@router.get("/{handle}", response_model=CompanyDetailEnvelope)
def get_company(handle: str, db: Session = Depends(get_db)):
    """Retrieve a company with its jobs."""
    return {"company": company_crud.get(db, handle)}


@router.patch("/{handle}", response_model=CompanyEnvelope)
def update_company(
    handle: str,
    request: CompanyUpdateRequest,
    db: Session = Depends(get_db),
    admin_user: Dict[str, Any] = Depends(get_admin_user)
):
    """Partially update a company. Admin only."""
    data = request.model_dump(exclude_unset=True, by_alias=True)
    return {"company": company_crud.update(db, handle, data)}


@router.delete("/{handle}", response_model=DeletedResponse)
def delete_company(
    handle: str,
    db: Session = Depends(get_db),
    admin_user: Dict[str, Any] = Depends(get_admin_user)
):
    """Delete a company and its jobs. Admin only."""
    company_crud.remove(db, handle)
    return {"deleted": handle}
