"""
CRUD operations for jobs.

Each operation issues one parameterized statement and returns plain dict
records {id, title, salary, equity, company_handle}. Searches are fixed
shapes ordered by title; search() picks the one matching the filters a
caller supplied.
"""

import logging
from typing import Any, Dict, List, Mapping, Optional

from sqlalchemy import Integer, Numeric, Text, delete, insert, select, text
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.core.errors import BadRequestError, NotFoundError
from app.core.sql import sql_for_partial_update
from app.models.company import Company
from app.models.job import Job
from app.schemas.job import JobCreateRequest

logger = logging.getLogger(__name__)

jobs = Job.__table__
companies = Company.__table__

JOB_COLUMNS = (jobs.c.id, jobs.c.title, jobs.c.salary, jobs.c.equity, jobs.c.company_handle)

# Public field name -> column, for fields whose names differ
JOB_UPDATE_COLUMNS = {"companyHandle": "company_handle"}


def _select_jobs():
    return select(*JOB_COLUMNS).order_by(jobs.c.title)


def _title_like(title: str):
    return jobs.c.title.ilike(f"%{title}%")


def _fetch_all(db: Session, stmt) -> List[Dict[str, Any]]:
    return [dict(row) for row in db.execute(stmt).mappings().all()]


def create(db: Session, job_data: JobCreateRequest) -> Dict[str, Any]:
    """
    Create a job.

    Args:
        db: Database session
        job_data: Validated job data; company_handle must name an existing company

    Returns:
        The new job record

    Raises:
        BadRequestError: If the company does not exist or a constraint fails
    """
    stmt = (
        insert(jobs)
        .values(
            title=job_data.title,
            salary=job_data.salary,
            equity=job_data.equity,
            company_handle=job_data.company_handle,
        )
        .returning(*JOB_COLUMNS)
    )

    try:
        job = dict(db.execute(stmt).mappings().one())
        db.commit()
    except IntegrityError as e:
        db.rollback()
        logger.warning(f"Rejected job for company {job_data.company_handle}: {e.orig}")
        raise BadRequestError(f"Invalid job data for company: {job_data.company_handle}")

    logger.info(f"Created job {job['id']}: {job['title']} ({job['company_handle']})")
    return job


def find_all(db: Session) -> List[Dict[str, Any]]:
    """Find all jobs."""
    return _fetch_all(db, _select_jobs())


def find_by_title(db: Session, title: str) -> List[Dict[str, Any]]:
    """Find jobs whose title contains `title`, case-insensitively."""
    return _fetch_all(db, _select_jobs().where(_title_like(title)))


def find_by_salary(db: Session, min_salary: int) -> List[Dict[str, Any]]:
    """Find jobs paying at least `min_salary`."""
    return _fetch_all(db, _select_jobs().where(jobs.c.salary >= min_salary))


def find_by_equity(db: Session) -> List[Dict[str, Any]]:
    """Find jobs that offer equity."""
    return _fetch_all(db, _select_jobs().where(jobs.c.equity > 0))


def find_by_equity_and_salary(db: Session, min_salary: int) -> List[Dict[str, Any]]:
    """Find jobs that offer equity and pay at least `min_salary`."""
    stmt = _select_jobs().where(jobs.c.equity > 0, jobs.c.salary >= min_salary)
    return _fetch_all(db, stmt)


def find_by_title_and_salary(db: Session, title: str, min_salary: int) -> List[Dict[str, Any]]:
    """Find jobs matching `title` that pay at least `min_salary`."""
    stmt = _select_jobs().where(_title_like(title), jobs.c.salary >= min_salary)
    return _fetch_all(db, stmt)


def find_by_title_and_equity(db: Session, title: str) -> List[Dict[str, Any]]:
    """Find jobs matching `title` that offer equity."""
    stmt = _select_jobs().where(jobs.c.equity > 0, _title_like(title))
    return _fetch_all(db, stmt)


def find_by_all(db: Session, title: str, min_salary: int) -> List[Dict[str, Any]]:
    """Find jobs matching `title`, paying at least `min_salary`, that offer equity."""
    stmt = _select_jobs().where(
        jobs.c.equity > 0,
        _title_like(title),
        jobs.c.salary >= min_salary,
    )
    return _fetch_all(db, stmt)


def search(
    db: Session,
    title: Optional[str] = None,
    min_salary: Optional[int] = None,
    has_equity: bool = False
) -> List[Dict[str, Any]]:
    """
    Dispatch to the search matching the supplied filters.

    An empty title counts as no title filter; has_equity=False means
    "don't filter on equity", not "jobs without equity".
    """
    has_title = bool(title)
    has_salary = min_salary is not None

    if has_title and has_salary and has_equity:
        return find_by_all(db, title, min_salary)
    if has_title and has_salary:
        return find_by_title_and_salary(db, title, min_salary)
    if has_title and has_equity:
        return find_by_title_and_equity(db, title)
    if has_salary and has_equity:
        return find_by_equity_and_salary(db, min_salary)
    if has_title:
        return find_by_title(db, title)
    if has_salary:
        return find_by_salary(db, min_salary)
    if has_equity:
        return find_by_equity(db)
    return find_all(db)


def get(db: Session, job_id: int) -> Dict[str, Any]:
    """
    Retrieve a job with its company.

    Returns:
        {id, title, salary, equity, company} where company is
        {handle, name, description, num_employees, logo_url}

    Raises:
        NotFoundError: If no job has this id
    """
    row = db.execute(select(*JOB_COLUMNS).where(jobs.c.id == job_id)).mappings().first()
    if row is None:
        raise NotFoundError(f"No job: {job_id}")

    job = dict(row)
    company = db.execute(
        select(
            companies.c.handle,
            companies.c.name,
            companies.c.description,
            companies.c.num_employees,
            companies.c.logo_url,
        ).where(companies.c.handle == job.pop("company_handle"))
    ).mappings().one()

    job["company"] = dict(company)
    return job


def update(db: Session, job_id: int, data: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Partially update a job; only the fields present in `data` change.

    Args:
        db: Database session
        job_id: Job to update
        data: Public field name -> new value, e.g. {"title": "New", "salary": 50000}

    Returns:
        The updated job record

    Raises:
        BadRequestError: If data is empty or violates a constraint
        NotFoundError: If no job has this id
    """
    update_sql = sql_for_partial_update(data, JOB_UPDATE_COLUMNS)
    id_idx = update_sql.next_placeholder

    stmt = text(
        f"UPDATE jobs "
        f"SET {update_sql.set_cols} "
        f"WHERE id = :p{id_idx} "
        f"RETURNING id, title, salary, equity, company_handle"
    ).columns(
        id=Integer,
        title=Text,
        salary=Integer,
        equity=Numeric,
        company_handle=Text,
    )

    try:
        row = db.execute(stmt, {**update_sql.params, f"p{id_idx}": job_id}).mappings().first()
    except IntegrityError as e:
        db.rollback()
        logger.warning(f"Rejected update for job {job_id}: {e.orig}")
        raise BadRequestError(f"Invalid update for job: {job_id}")

    if row is None:
        db.rollback()
        raise NotFoundError(f"No job: {job_id}")

    job = dict(row)
    db.commit()

    logger.info(f"Updated job {job_id}: {', '.join(data)}")
    return job


def remove(db: Session, job_id: int) -> None:
    """
    Delete a job.

    Raises:
        NotFoundError: If no job has this id
    """
    row = db.execute(delete(jobs).where(jobs.c.id == job_id).returning(jobs.c.id)).first()
    if row is None:
        db.rollback()
        raise NotFoundError(f"No job: {job_id}")

    db.commit()
    logger.info(f"Deleted job {job_id}")
