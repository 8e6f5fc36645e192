"""
CRUD operations for companies.
"""

import logging
from typing import Any, Dict, List, Mapping, Optional

from sqlalchemy import Integer, Text, delete, insert, select, text
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.core.errors import BadRequestError, NotFoundError
from app.core.sql import sql_for_partial_update
from app.models.company import Company
from app.models.job import Job
from app.schemas.company import CompanyCreateRequest

logger = logging.getLogger(__name__)

companies = Company.__table__
jobs = Job.__table__

COMPANY_COLUMNS = (
    companies.c.handle,
    companies.c.name,
    companies.c.description,
    companies.c.num_employees,
    companies.c.logo_url,
)

COMPANY_UPDATE_COLUMNS = {
    "numEmployees": "num_employees",
    "logoUrl": "logo_url",
}


def create(db: Session, company_data: CompanyCreateRequest) -> Dict[str, Any]:
    """
    Create a company.

    Raises:
        BadRequestError: If the handle (or name) is already taken
    """
    stmt = (
        insert(companies)
        .values(
            handle=company_data.handle,
            name=company_data.name,
            description=company_data.description,
            num_employees=company_data.num_employees,
            logo_url=company_data.logo_url,
        )
        .returning(*COMPANY_COLUMNS)
    )

    try:
        company = dict(db.execute(stmt).mappings().one())
        db.commit()
    except IntegrityError:
        db.rollback()
        raise BadRequestError(f"Duplicate company: {company_data.handle}")

    logger.info(f"Created company {company['handle']}")
    return company


def find_all(
    db: Session,
    name_like: Optional[str] = None,
    min_employees: Optional[int] = None,
    max_employees: Optional[int] = None
) -> List[Dict[str, Any]]:
    """
    Find companies, optionally filtered. Filters combine with AND.

    Args:
        db: Database session
        name_like: Case-insensitive substring of the company name
        min_employees: Minimum employee count (inclusive)
        max_employees: Maximum employee count (inclusive)

    Raises:
        BadRequestError: If min_employees > max_employees
    """
    if min_employees is not None and max_employees is not None and min_employees > max_employees:
        raise BadRequestError("minEmployees cannot be greater than maxEmployees")

    query = select(*COMPANY_COLUMNS)

    if name_like:
        query = query.where(companies.c.name.ilike(f"%{name_like}%"))
    if min_employees is not None:
        query = query.where(companies.c.num_employees >= min_employees)
    if max_employees is not None:
        query = query.where(companies.c.num_employees <= max_employees)

    rows = db.execute(query.order_by(companies.c.name)).mappings().all()
    return [dict(row) for row in rows]


def get(db: Session, handle: str) -> Dict[str, Any]:
    """
    Retrieve a company with its jobs.

    Returns:
        {handle, name, description, num_employees, logo_url, jobs}
        where jobs is [{id, title, salary, equity}, ...]

    Raises:
        NotFoundError: If no company has this handle
    """
    row = db.execute(select(*COMPANY_COLUMNS).where(companies.c.handle == handle)).mappings().first()
    if row is None:
        raise NotFoundError(f"No company: {handle}")

    company = dict(row)
    job_rows = db.execute(
        select(jobs.c.id, jobs.c.title, jobs.c.salary, jobs.c.equity)
        .where(jobs.c.company_handle == handle)
        .order_by(jobs.c.id)
    ).mappings().all()

    company["jobs"] = [dict(job) for job in job_rows]
    return company


def update(db: Session, handle: str, data: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Partially update a company; only the fields present in `data` change.

    Args:
        data: Public field name -> new value, e.g. {"numEmployees": 10, "logoUrl": None}

    Raises:
        BadRequestError: If data is empty or violates a constraint
        NotFoundError: If no company has this handle
    """
    update_sql = sql_for_partial_update(data, COMPANY_UPDATE_COLUMNS)
    handle_idx = update_sql.next_placeholder

    stmt = text(
        f"UPDATE companies "
        f"SET {update_sql.set_cols} "
        f"WHERE handle = :p{handle_idx} "
        f"RETURNING handle, name, description, num_employees, logo_url"
    ).columns(
        handle=Text,
        name=Text,
        description=Text,
        num_employees=Integer,
        logo_url=Text,
    )

    try:
        row = db.execute(stmt, {**update_sql.params, f"p{handle_idx}": handle}).mappings().first()
    except IntegrityError:
        db.rollback()
        raise BadRequestError(f"Invalid update for company: {handle}")

    if row is None:
        db.rollback()
        raise NotFoundError(f"No company: {handle}")

    company = dict(row)
    db.commit()

    logger.info(f"Updated company {handle}: {', '.join(data)}")
    return company


def remove(db: Session, handle: str) -> None:
    """
    Delete a company and, through the foreign key, its jobs.

    Raises:
        NotFoundError: If no company has this handle
    """
    row = db.execute(
        delete(companies).where(companies.c.handle == handle).returning(companies.c.handle)
    ).first()
    if row is None:
        db.rollback()
        raise NotFoundError(f"No company: {handle}")

    db.commit()
    logger.info(f"Deleted company {handle}")
