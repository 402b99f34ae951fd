"""
Data access layer - the only code that writes to the database.

Every function takes an open session (see `get_db_session`), so callers
decide the transaction scope:

    with get_db_session() as db:
        department = get_department(db, 1)

Reads return rows as stored; writes flush so the returned row carries its
server-assigned id and timestamps. Missing ids raise NotFound.
"""

from typing import Any, Dict, List, Optional

from sqlalchemy import desc, func, select
from sqlalchemy.orm import Session

from satrecruit.core.exceptions import NotFound
from satrecruit.db.models import AboutUs, Applicant, Department, User, utcnow, valid_id


# ============================================================
# USERS
# ============================================================

def get_user_by_username(db: Session, username: str) -> Optional[User]:
    q = select(User).where(User.username == username).limit(1)
    return db.execute(q).scalars().first()


def create_user(db: Session, username: str, password_hash: str) -> User:
    user = User(username=username, password=password_hash)
    db.add(user)
    db.flush()
    return user


# ============================================================
# DEPARTMENTS
# ============================================================

def list_departments(db: Session) -> List[Department]:
    return list(db.execute(select(Department).order_by(Department.id)).scalars().all())


def count_departments(db: Session) -> int:
    return db.execute(select(func.count(Department.id))).scalar_one()


def get_department(db: Session, department_id: int) -> Department:
    # Ids outside the INTEGER column range cannot exist
    department = db.get(Department, department_id) if valid_id(department_id) else None
    if department is None:
        raise NotFound("Department not found")
    return department


def department_exists(db: Session, department_id: int) -> bool:
    return valid_id(department_id) and db.get(Department, department_id) is not None


def create_department(db: Session, data: Dict[str, Any]) -> Department:
    department = Department(
        name=data["name"],
        description=data["description"],
        icon=data["icon"],
        color=data["color"],
        requirements=list(data.get("requirements") or []),
        responsibilities=list(data.get("responsibilities") or []),
    )
    db.add(department)
    db.flush()
    return department


# ============================================================
# APPLICANTS
# ============================================================

def list_applicants(db: Session) -> List[Applicant]:
    """All applicants, newest first."""
    q = select(Applicant).order_by(desc(Applicant.created_at), desc(Applicant.id))
    return list(db.execute(q).scalars().all())


def get_applicant(db: Session, applicant_id: int) -> Applicant:
    applicant = db.get(Applicant, applicant_id) if valid_id(applicant_id) else None
    if applicant is None:
        raise NotFound("Applicant not found")
    return applicant


def create_applicant(db: Session, data: Dict[str, Any], resume_path: Optional[str] = None) -> Applicant:
    """
    Insert an applicant row. `data` uses the column names of the model
    (first_name, last_name, ...). id and created_at are assigned here.
    """
    applicant = Applicant(
        first_name=data["first_name"],
        last_name=data["last_name"],
        email=data["email"],
        phone=data.get("phone"),
        department_id=data["department_id"],
        experience=data["experience"],
        skills=data["skills"],
        cover_letter=data.get("cover_letter"),
        resume_path=resume_path,
        created_at=utcnow(),
    )
    db.add(applicant)
    db.flush()
    return applicant


def delete_applicant(db: Session, applicant_id: int) -> Applicant:
    """Delete an applicant row and return it (its resume_path is still readable)."""
    applicant = get_applicant(db, applicant_id)
    db.delete(applicant)
    db.flush()
    return applicant


# ============================================================
# ABOUT US
# ============================================================

def get_about_us(db: Session) -> Optional[AboutUs]:
    q = select(AboutUs).order_by(AboutUs.id).limit(1)
    return db.execute(q).scalars().first()


def upsert_about_us(db: Session, content: str) -> AboutUs:
    """Update the current row in place, or create it on first write."""
    about = get_about_us(db)
    if about is None:
        about = AboutUs(content=content, updated_at=utcnow())
        db.add(about)
    else:
        about.content = content
        about.updated_at = utcnow()
    db.flush()
    return about
