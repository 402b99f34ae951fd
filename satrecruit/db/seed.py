"""
Startup bootstrap: default departments and the admin account.

Both steps are check-then-insert and safe to run on every start.
"""

import logging
from typing import Any, Dict, List

from satrecruit.core.auth import hash_password
from satrecruit.core.config import get_settings
from satrecruit.db import crud
from satrecruit.db.session import get_db_session

logger = logging.getLogger(__name__)

DEFAULT_DEPARTMENTS: List[Dict[str, Any]] = [
    {
        "name": "Engineering",
        "description": "Design and build cutting-edge satellite hardware and systems that operate in the harsh conditions of space.",
        "icon": "cogs",
        "color": "#4D9DE0",
        "requirements": [
            "Bachelor's degree in Aerospace/Mechanical Engineering",
            "Experience with CAD software",
            "Knowledge of spacecraft systems",
        ],
        "responsibilities": [
            "Design satellite components",
            "Test hardware performance",
            "Collaborate with interdisciplinary teams",
        ],
    },
    {
        "name": "Communications",
        "description": "Develop and maintain advanced communication systems that connect our satellites with ground stations.",
        "icon": "satellite-dish",
        "color": "#F46036",
        "requirements": [
            "Degree in Electrical Engineering or related field",
            "RF communications experience",
            "Signal processing knowledge",
        ],
        "responsibilities": [
            "Design communication protocols",
            "Implement signal processing algorithms",
            "Maintain ground station links",
        ],
    },
    {
        "name": "Data Science",
        "description": "Analyze and interpret the vast amounts of data collected by our satellite systems for valuable insights.",
        "icon": "chart-bar",
        "color": "#7B5EA7",
        "requirements": [
            "Statistics or Computer Science degree",
            "Experience with Python and data analysis",
            "Machine learning expertise",
        ],
        "responsibilities": [
            "Develop data processing pipelines",
            "Create ML models for satellite data",
            "Generate insights from collected data",
        ],
    },
]


def seed_departments(departments: List[Dict[str, Any]] = None) -> int:
    """
    Insert the default departments if the table is empty.
    Returns the number of rows inserted (0 when already seeded).
    """
    departments = DEFAULT_DEPARTMENTS if departments is None else departments

    with get_db_session() as db:
        if crud.count_departments(db) > 0:
            return 0
        for data in departments:
            crud.create_department(db, data)

    logger.info("Seeded %d departments", len(departments))
    return len(departments)


def ensure_admin_user() -> bool:
    """
    Create the configured admin account if a password is set and the user
    does not exist yet. Returns True when a user was created.
    """
    settings = get_settings()
    if not settings.admin_password:
        if settings.require_admin_auth:
            logger.warning("ADMIN_PASSWORD is not set; admin login only works for existing users")
        return False

    with get_db_session() as db:
        if crud.get_user_by_username(db, settings.admin_username):
            return False
        crud.create_user(db, settings.admin_username, hash_password(settings.admin_password))

    logger.info("Created admin user '%s'", settings.admin_username)
    return True
