import logging
from typing import Annotated, Any, Dict

from fastapi import APIRouter, Depends, Path, Query, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from jobly.database import get_db
from jobly.routers.auth_deps import ensure_admin
from jobly.schemas.job import (
    DeletedResponse,
    JobCreate,
    JobEnvelope,
    JobFilter,
    JobListEnvelope,
    JobUpdate,
    MAX_INT,
)
from jobly.services.job_service import JobService

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/jobs",
    tags=["Jobs"],
)

@router.post("", response_model=JobEnvelope, status_code=status.HTTP_201_CREATED)
def create_job(
    job_in: JobCreate,
    db: Session = Depends(get_db),
    current_user: Dict[str, Any] = Depends(ensure_admin),
):
    """
    Create a new job posting.

    Authorization required: admin
    """
    try:
        job = JobService.create(
            db,
            title=job_in.title,
            salary=job_in.salary,
            equity=job_in.equity,
            company_handle=job_in.company_handle,
        )
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        raise

    logger.info(f"Job {job['id']} created by {current_user['username']}")
    return {"job": job}

@router.get("", response_model=JobListEnvelope)
def get_jobs(
    filters: Annotated[JobFilter, Query()],
    db: Session = Depends(get_db),
):
    """
    List jobs ordered by id.

    Optional filters: title (case-insensitive substring), minSalary,
    hasEquity (only "true" filters on equity > 0).
    """
    criteria = filters.model_dump(exclude_none=True)
    if not criteria:
        return {"jobs": JobService.find_all(db)}

    jobs = JobService.find_all_filtered(
        db,
        title=filters.title,
        min_salary=filters.minSalary,
        has_equity=filters.hasEquity,
    )
    return {"jobs": jobs}

@router.get("/{job_id}", response_model=JobEnvelope)
def get_job(
    job_id: Annotated[int, Path(le=MAX_INT)],
    db: Session = Depends(get_db),
):
    """
    Get job details.
    """
    return {"job": JobService.get(db, job_id)}

@router.patch("/{job_id}", response_model=JobEnvelope)
def update_job(
    job_id: Annotated[int, Path(le=MAX_INT)],
    job_in: JobUpdate,
    db: Session = Depends(get_db),
    current_user: Dict[str, Any] = Depends(ensure_admin),
):
    """
    Partially update a job: title, salary and/or equity.

    Authorization required: admin
    """
    update_data = job_in.model_dump(exclude_unset=True)
    try:
        job = JobService.update(db, job_id, update_data)
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        raise

    return {"job": job}

@router.delete("/{job_id}", response_model=DeletedResponse)
def delete_job(
    job_id: Annotated[int, Path(le=MAX_INT)],
    db: Session = Depends(get_db),
    current_user: Dict[str, Any] = Depends(ensure_admin),
):
    """
    Hard delete; there is no soft-delete state for jobs.

    Authorization required: admin
    """
    try:
        JobService.remove(db, job_id)
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        raise

    logger.info(f"Job {job_id} deleted by {current_user['username']}")
    return {"deleted": job_id}
