"""
Admin Routes (Bearer token required unless REQUIRE_ADMIN_AUTH=false)

GET /admin/applicants - List applicants, newest first
DELETE /admin/applicants/{applicant_id} - Delete applicant and resume file
GET /admin/applicants/{applicant_id}/resume - Download stored resume
PUT /admin/about - Update "about us" content
"""

from typing import List

from fastapi import APIRouter, Depends
from fastapi.responses import FileResponse

from satrecruit.core.auth import get_current_admin
from satrecruit.core.exceptions import NotFound
from satrecruit.db import crud
from satrecruit.db.session import get_db_session
from satrecruit.services.intake_service import delete_applicant
from satrecruit.utils.file_upload import resolve_resume_path
from satrecruit.schemas.schemas import (
    AboutUsResponse, AboutUsUpdate, ApplicantResponse, ErrorResponse, MessageResponse
)

router = APIRouter(
    prefix="/admin",
    tags=["Admin"],
    dependencies=[Depends(get_current_admin)],
    responses={401: {"model": ErrorResponse}},
)


@router.get("/applicants", response_model=List[ApplicantResponse])
async def list_applicants():
    """All applicants, newest first."""
    with get_db_session() as db:
        return crud.list_applicants(db)


@router.delete("/applicants/{applicant_id}", response_model=MessageResponse,
               responses={404: {"model": ErrorResponse}})
async def remove_applicant(applicant_id: int):
    """Delete an applicant. Their resume file is removed as well."""
    delete_applicant(applicant_id)
    return MessageResponse(message=f"Applicant {applicant_id} deleted")


@router.get("/applicants/{applicant_id}/resume", responses={404: {"model": ErrorResponse}})
async def download_resume(applicant_id: int):
    """Stream the applicant's stored resume file."""
    with get_db_session() as db:
        applicant = crud.get_applicant(db, applicant_id)

    if not applicant.resume_path:
        raise NotFound("Applicant has no resume")

    path = resolve_resume_path(applicant.resume_path)
    if not path.is_file():
        raise NotFound("Resume file not found")

    return FileResponse(path, filename=path.name)


@router.put("/about", response_model=AboutUsResponse, responses={400: {"model": ErrorResponse}})
async def update_about(data: AboutUsUpdate):
    """Replace the "about us" content (single row, last write wins)."""
    with get_db_session() as db:
        return crud.upsert_about_us(db, data.content)
