import pytest
from decimal import Decimal
from sqlalchemy import text
from sqlalchemy.exc import IntegrityError

from jobly.core.exceptions import BadRequestError, NotFoundError
from jobly.services.job_service import JobService, _to_job

# ---------------------------------------------------------------- create

def test_create_job(db_session, companies):
    """Test creating a job returns the stored row with its new id."""
    new_job = {"title": "test", "salary": 1000000, "equity": "0", "companyHandle": "c2"}
    job = JobService.create(
        db_session,
        title="test",
        salary=1000000,
        equity="0",
        company_handle="c2",
    )
    assert isinstance(job["id"], int)
    assert job == {"id": job["id"], **new_job}

    row = db_session.execute(
        text('SELECT id, title, salary, company_handle AS "companyHandle" FROM jobs WHERE id = :id'),
        {"id": job["id"]},
    ).mappings().one()
    assert row["title"] == "test"
    assert row["companyHandle"] == "c2"

def test_create_then_get_round_trip(db_session, companies):
    job = JobService.create(db_session, title="Engineer", salary=None, equity=None, company_handle="c1")
    assert JobService.get(db_session, job["id"]) == job
    assert job["salary"] is None
    assert job["equity"] is None

def test_create_unknown_company_fails(db_session, companies):
    with pytest.raises(IntegrityError):
        JobService.create(db_session, title="Ghost", salary=1, equity="0", company_handle="nope")

# ---------------------------------------------------------------- find_all

def test_find_all_ordered_by_id(db_session, test_jobs):
    jobs = JobService.find_all(db_session)
    assert jobs == test_jobs
    assert [j["id"] for j in jobs] == sorted(j["id"] for j in jobs)

def test_find_all_empty(db_session):
    assert JobService.find_all(db_session) == []

# ---------------------------------------------------------------- find_all_filtered

def test_filter_by_title(db_session, test_jobs):
    jobs = JobService.find_all_filtered(db_session, title="job")
    assert [j["title"] for j in jobs] == ["job1", "job2", "job3"]

def test_filter_by_title_is_case_insensitive(db_session, test_jobs):
    jobs = JobService.find_all_filtered(db_session, title="JOB2")
    assert [j["title"] for j in jobs] == ["job2"]

def test_filter_by_title_matches_inside_words(db_session, test_jobs):
    assert JobService.find_all_filtered(db_session, title="ob1") == [test_jobs[0]]

def test_filter_by_min_salary(db_session, test_jobs):
    jobs = JobService.find_all_filtered(db_session, min_salary=50000)
    assert jobs == [test_jobs[0], test_jobs[1]]

def test_filter_min_salary_zero_is_applied(db_session, test_jobs, companies):
    JobService.create(db_session, title="unpaid", salary=None, equity=None, company_handle="c1")
    jobs = JobService.find_all_filtered(db_session, min_salary=0)
    assert "unpaid" not in [j["title"] for j in jobs]
    assert len(jobs) == len(test_jobs)

def test_filter_has_equity(db_session, test_jobs):
    jobs = JobService.find_all_filtered(db_session, has_equity=True)
    assert jobs == [test_jobs[0], test_jobs[2]]
    assert [j["equity"] for j in jobs] == ["1", "0.5"]

def test_filter_has_equity_false_applies_no_constraint(db_session, test_jobs):
    """False means 'don't care', so zero-equity jobs stay in the result."""
    jobs = JobService.find_all_filtered(db_session, has_equity=False)
    assert jobs == test_jobs
    assert jobs != JobService.find_all_filtered(db_session, has_equity=True)

def test_filter_all_three(db_session, test_jobs):
    jobs = JobService.find_all_filtered(db_session, title="Job", min_salary=50000, has_equity=True)
    assert jobs == [test_jobs[0]]

def test_filter_title_and_min_salary_renumber_params(db_session, test_jobs):
    jobs = JobService.find_all_filtered(db_session, title="j", min_salary=45000)
    assert [j["title"] for j in jobs] == ["job1", "job2"]

def test_no_filters_matches_find_all(db_session, test_jobs):
    assert JobService.find_all_filtered(db_session) == JobService.find_all(db_session)

def test_filter_no_matches(db_session, test_jobs):
    assert JobService.find_all_filtered(db_session, title="nonexistent") == []

# ---------------------------------------------------------------- get

def test_get_job(db_session, test_jobs):
    assert JobService.get(db_session, test_jobs[0]["id"]) == test_jobs[0]

def test_get_missing_job(db_session, test_jobs):
    with pytest.raises(NotFoundError) as excinfo:
        JobService.get(db_session, 0)
    assert excinfo.value.message == "No job: 0"

# ---------------------------------------------------------------- update

def test_update_job(db_session, test_jobs):
    job = JobService.update(db_session, test_jobs[0]["id"], {
        "title": "updated job",
        "salary": 10,
        "equity": "0",
    })
    assert job == {
        "id": test_jobs[0]["id"],
        "title": "updated job",
        "salary": 10,
        "equity": "0",
        "companyHandle": "c1",
    }
    assert JobService.get(db_session, test_jobs[0]["id"]) == job

def test_update_leaves_absent_fields_untouched(db_session, test_jobs):
    job = JobService.update(db_session, test_jobs[2]["id"], {"salary": 45000})
    assert job == {**test_jobs[2], "salary": 45000}

def test_update_can_null_a_field(db_session, test_jobs):
    job = JobService.update(db_session, test_jobs[1]["id"], {"salary": None, "equity": None})
    assert job["salary"] is None
    assert job["equity"] is None
    assert job["title"] == "job2"

def test_update_missing_job(db_session, test_jobs):
    with pytest.raises(NotFoundError):
        JobService.update(db_session, 0, {"title": "updated job", "salary": 10, "equity": "0"})

def test_update_with_no_data(db_session, test_jobs):
    with pytest.raises(BadRequestError):
        JobService.update(db_session, test_jobs[0]["id"], {})
    assert JobService.get(db_session, test_jobs[0]["id"]) == test_jobs[0]

# ---------------------------------------------------------------- remove

def test_remove_job(db_session, test_jobs):
    JobService.remove(db_session, test_jobs[0]["id"])
    with pytest.raises(NotFoundError):
        JobService.get(db_session, test_jobs[0]["id"])
    assert len(JobService.find_all(db_session)) == len(test_jobs) - 1

def test_remove_missing_job(db_session, test_jobs):
    with pytest.raises(NotFoundError):
        JobService.remove(db_session, 0)

def test_remove_twice(db_session, test_jobs):
    JobService.remove(db_session, test_jobs[3]["id"])
    with pytest.raises(NotFoundError):
        JobService.remove(db_session, test_jobs[3]["id"])

# ---------------------------------------------------------------- row rendering

@pytest.mark.parametrize("stored, rendered", [
    (Decimal("0.00000001"), "0.00000001"),
    (Decimal("0.50"), "0.50"),
    (Decimal("0"), "0"),
    (1e-08, "0.00000001"),
    (0.5, "0.5"),
    (1, "1"),
    ("0.042", "0.042"),
    (None, None),
])
def test_equity_rendered_as_plain_decimal_text(stored, rendered):
    """NUMERIC values from either driver come back without exponent notation."""
    row = {"id": 1, "title": "t", "salary": 1, "equity": stored, "companyHandle": "c1"}
    assert _to_job(row)["equity"] == rendered

def test_not_found_carries_job_id(db_session, test_jobs):
    with pytest.raises(NotFoundError) as excinfo:
        JobService.remove(db_session, 0)
    assert excinfo.value.details == {"id": 0}
