"""
Data access for job postings.

Every operation is a single parameterized statement against the ``jobs``
table. Nothing here commits: the caller owns the transaction.
"""
import logging
from decimal import Decimal
from typing import Any, Dict, List, Mapping, Optional

from sqlalchemy import text
from sqlalchemy.orm import Session

from jobly.core.exceptions import NotFoundError
from jobly.core.sql import bind_params, sql_for_partial_update

logger = logging.getLogger(__name__)

JOB_COLUMNS = 'id, title, salary, equity, company_handle AS "companyHandle"'

# API field name -> column name, for fields whose names differ
JOB_FIELD_COLUMNS = {
    "companyHandle": "company_handle",
}


def _equity_text(value: Any) -> Optional[str]:
    """
    NUMERIC comes back as Decimal (PostgreSQL) or int/float (SQLite).
    Render it in plain positional notation, never as "1E-8".
    """
    if value is None or isinstance(value, str):
        return value
    if not isinstance(value, Decimal):
        value = Decimal(str(value))
    return format(value, "f")


def _to_job(row: Mapping[str, Any]) -> Dict[str, Any]:
    job = dict(row)
    job["equity"] = _equity_text(job["equity"])
    return job


class JobService:
    """Create, query, update and delete rows of the ``jobs`` table."""

    @staticmethod
    def create(
        db: Session,
        title: str,
        salary: Optional[int],
        equity: Optional[str],
        company_handle: str,
    ) -> Dict[str, Any]:
        """
        Insert a job and return it with its new id.

        Integrity errors (unknown company, failed checks) propagate as-is.
        """
        result = db.execute(
            text(
                f"""INSERT INTO jobs (title, salary, equity, company_handle)
                    VALUES (:1, :2, :3, :4)
                    RETURNING {JOB_COLUMNS}"""
            ),
            bind_params([title, salary, equity, company_handle]),
        )
        job = _to_job(result.mappings().one())
        logger.info(f"Created job {job['id']} for company {company_handle}")
        return job

    @staticmethod
    def find_all(db: Session) -> List[Dict[str, Any]]:
        result = db.execute(
            text(f"SELECT {JOB_COLUMNS} FROM jobs ORDER BY id")
        )
        return [_to_job(row) for row in result.mappings()]

    @staticmethod
    def find_all_filtered(
        db: Session,
        title: Optional[str] = None,
        min_salary: Optional[int] = None,
        has_equity: Optional[bool] = None,
    ) -> List[Dict[str, Any]]:
        """
        Jobs matching every filter given, ordered by id.

        - title: case-insensitive substring of the job title
        - min_salary: salary >= min_salary
        - has_equity: True keeps only jobs with equity > 0; False means no
          equity filter at all
        """
        conds: List[str] = []
        values: List[Any] = []

        if title:
            values.append(f"%{title}%")
            conds.append(f"LOWER(title) LIKE LOWER(:{len(values)})")
        if min_salary is not None:
            values.append(min_salary)
            conds.append(f"salary >= :{len(values)}")
        if has_equity:
            conds.append("equity > 0")

        query = f"SELECT {JOB_COLUMNS} FROM jobs"
        if conds:
            query += " WHERE " + " AND ".join(conds)
        query += " ORDER BY id"

        logger.debug(f"Filtering jobs with {len(conds)} condition(s)")
        result = db.execute(text(query), bind_params(values))
        return [_to_job(row) for row in result.mappings()]

    @staticmethod
    def get(db: Session, job_id: int) -> Dict[str, Any]:
        """Raises NotFoundError if there is no such job."""
        result = db.execute(
            text(f"SELECT {JOB_COLUMNS} FROM jobs WHERE id = :1"),
            bind_params([job_id]),
        )
        row = result.mappings().first()
        if row is None:
            raise NotFoundError(f"No job: {job_id}", details={"id": job_id})
        return _to_job(row)

    @staticmethod
    def update(db: Session, job_id: int, data: Mapping[str, Any]) -> Dict[str, Any]:
        """
        Partial update: only keys present in ``data`` are written.

        Raises BadRequestError when ``data`` is empty and NotFoundError when
        the job does not exist.
        """
        set_cols, values = sql_for_partial_update(data, JOB_FIELD_COLUMNS)
        id_var_idx = len(values) + 1

        result = db.execute(
            text(
                f"""UPDATE jobs
                    SET {set_cols}
                    WHERE id = :{id_var_idx}
                    RETURNING {JOB_COLUMNS}"""
            ),
            bind_params([*values, job_id]),
        )
        row = result.mappings().first()
        if row is None:
            raise NotFoundError(f"No job: {job_id}", details={"id": job_id})

        logger.info(f"Updated job {job_id}: {', '.join(data.keys())}")
        return _to_job(row)

    @staticmethod
    def remove(db: Session, job_id: int) -> None:
        """Raises NotFoundError if there is no such job."""
        result = db.execute(
            text("DELETE FROM jobs WHERE id = :1 RETURNING id"),
            bind_params([job_id]),
        )
        if result.first() is None:
            raise NotFoundError(f"No job: {job_id}", details={"id": job_id})
        logger.info(f"Deleted job {job_id}")
