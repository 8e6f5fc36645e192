import logging
from typing import Any, Dict, Optional
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.core.deps import get_admin_user
from app.crud import job as job_crud
from app.schemas.common import DeletedResponse
from app.schemas.job import (
    JobCreateRequest,
    JobDetailEnvelope,
    JobEnvelope,
    JobListResponse,
    JobUpdateRequest,
)

router = APIRouter(prefix="/jobs", tags=["Jobs"])
logger = logging.getLogger(__name__)


@router.post("/", status_code=201, response_model=JobEnvelope)
def create_job(
    request: JobCreateRequest,
    db: Session = Depends(get_db),
    admin_user: Dict[str, Any] = Depends(get_admin_user)
):
    """
    Create a job posting. Admin only.

    companyHandle must reference an existing company.
    """
    new_job = job_crud.create(db, request)
    logger.info(f"Admin {admin_user['username']} created job {new_job['id']}")
    return {"job": new_job}


@router.get("/", response_model=JobListResponse)
def list_jobs(
    title: Optional[str] = Query(None, description="Case-insensitive title substring"),
    min_salary: Optional[int] = Query(None, alias="minSalary", ge=0),
    has_equity: bool = Query(False, alias="hasEquity"),
    db: Session = Depends(get_db)
):
    """
    List jobs ordered by title, with optional filters.

    Args:
        title: Only jobs whose title contains this text
        minSalary: Only jobs paying at least this much
        hasEquity: If true, only jobs offering equity
    """
    jobs = job_crud.search(db, title=title, min_salary=min_salary, has_equity=has_equity)
    return {"jobs": jobs}


@router.get("/{job_id}", response_model=JobDetailEnvelope)
def get_job(job_id: int, db: Session = Depends(get_db)):
    """Retrieve a job with its company."""
    return {"job": job_crud.get(db, job_id)}


@router.patch("/{job_id}", response_model=JobEnvelope)
def update_job(
    job_id: int,
    request: JobUpdateRequest,
    db: Session = Depends(get_db),
    admin_user: Dict[str, Any] = Depends(get_admin_user)
):
    """
    Partially update a job. Admin only.

    Only title, salary and equity can change; an empty body is rejected.
    """
    data = request.model_dump(exclude_unset=True, by_alias=True)
    return {"job": job_crud.update(db, job_id, data)}


@router.delete("/{job_id}", response_model=DeletedResponse)
def delete_job(
    job_id: int,
    db: Session = Depends(get_db),
    admin_user: Dict[str, Any] = Depends(get_admin_user)
):
    """Delete a job. Admin only."""
    job_crud.remove(db, job_id)
    return {"deleted": str(job_id)}
