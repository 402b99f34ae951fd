"""
Department Routes

GET /departments - List all departments
GET /departments/{department_id} - Get department details
"""

from typing import List

from fastapi import APIRouter

from satrecruit.db import crud
from satrecruit.db.session import get_db_session
from satrecruit.schemas.schemas import DepartmentResponse, ErrorResponse

router = APIRouter(prefix="/departments", tags=["Departments"])


@router.get("", response_model=List[DepartmentResponse])
async def list_departments():
    """List all departments. An empty store returns an empty list."""
    with get_db_session() as db:
        return crud.list_departments(db)


@router.get("/{department_id}", response_model=DepartmentResponse,
            responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}})
async def get_department(department_id: int):
    """Get one department by id."""
    with get_db_session() as db:
        return crud.get_department(db, department_id)
