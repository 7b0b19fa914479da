import sys
import os
import logging
from sqlalchemy.orm import Session

# Ensure we can import jobly modules
sys.path.append(os.getcwd())

from jobly.database import SessionLocal, init_db
from jobly.models import Company
from jobly.services.job_service import JobService

# Configure logging
logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(message)s")
logger = logging.getLogger(__name__)

COMPANIES = [
    {"handle": "anderson-arias-morrow", "name": "Anderson, Arias and Morrow", "num_employees": 245,
     "description": "Somebody program how I. Face give away discussion view act inside."},
    {"handle": "bauer-gallagher", "name": "Bauer-Gallagher", "num_employees": 862,
     "description": "Difficult ready trip question produce produce someone."},
    {"handle": "watson-davis", "name": "Watson-Davis", "num_employees": 819,
     "description": "Year join loss."},
]

JOBS = [
    ("Conservation officer, nature", 110000, "0", "anderson-arias-morrow"),
    ("Information officer", 200000, None, "anderson-arias-morrow"),
    ("Consulting civil engineer", 60000, "0.042", "bauer-gallagher"),
    ("Paediatric nurse", 98000, "0.017", "watson-davis"),
    ("Technical brewer", None, "0", "watson-davis"),
]

def seed():
    init_db()
    db: Session = SessionLocal()
    try:
        if db.query(Company).count() > 0:
            logger.warning("Companies already present; skipping seed.")
            return

        for data in COMPANIES:
            db.add(Company(**data))
        db.flush()

        for title, salary, equity, handle in JOBS:
            JobService.create(db, title=title, salary=salary, equity=equity, company_handle=handle)

        db.commit()
        logger.info(f"Seeded {len(COMPANIES)} companies and {len(JOBS)} jobs.")
    except Exception as e:
        logger.error(f"Error seeding database: {e}")
        db.rollback()
        raise
    finally:
        db.close()

if __name__ == "__main__":
    seed()
