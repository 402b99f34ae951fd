"""
Applicant Routes

POST /applicants - Submit an application (multipart form, optional resume)
GET /applicants/resume/formats - Get supported resume formats
"""

from typing import Optional

from fastapi import APIRouter, File, Form, UploadFile

from satrecruit.services.intake_service import submit_application
from satrecruit.utils.file_upload import get_supported_formats
from satrecruit.schemas.schemas import ApplicantResponse, ErrorResponse

router = APIRouter(prefix="/applicants", tags=["Applicants"])


@router.post("", response_model=ApplicantResponse, status_code=201,
             responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}})
async def create_applicant(
    first_name: Optional[str] = Form(None, alias="firstName"),
    last_name: Optional[str] = Form(None, alias="lastName"),
    email: Optional[str] = Form(None),
    phone: Optional[str] = Form(None),
    department_id: Optional[str] = Form(None, alias="departmentId"),
    experience: Optional[str] = Form(None),
    skills: Optional[str] = Form(None),
    cover_letter: Optional[str] = Form(None, alias="coverLetter"),
    resume: Optional[UploadFile] = File(None, description="Resume file (PDF, DOC or DOCX)"),
):
    """
    Submit an application.

    All fields are accepted as optional strings so that validation can
    report every missing or malformed field in one 400 response.
    """
    fields = {
        "firstName": first_name,
        "lastName": last_name,
        "email": email,
        "phone": phone,
        "departmentId": department_id,
        "experience": experience,
        "skills": skills,
        "coverLetter": cover_letter,
    }
    return await submit_application(fields, resume)


@router.get("/resume/formats")
async def resume_formats():
    """Get supported resume file formats."""
    return get_supported_formats()
