"""
Intake Service - turns an untrusted application form into an applicant row.

Process:
1. Validate every form field (all problems reported together)
2. Check the department exists
3. Validate the resume file (type, size)
4. Write the resume to the upload directory
5. Insert the applicant row

If step 5 fails the file from step 4 is removed again, so a stored resume
never outlives a failed submission.
"""

import logging
from typing import Any, Dict, Mapping, Optional

from fastapi import UploadFile
from pydantic import ValidationError as PydanticValidationError

from satrecruit.core.exceptions import ValidationError
from satrecruit.db import crud
from satrecruit.db.models import Applicant
from satrecruit.db.session import get_db_session
from satrecruit.schemas.schemas import ApplicantForm, parse_department_id
from satrecruit.utils.file_upload import has_file, read_resume, remove_resume, save_resume

logger = logging.getLogger(__name__)


def collect_field_errors(exc: PydanticValidationError) -> Dict[str, str]:
    """
    Flatten pydantic errors into {field: message}, first message per field.
    Fields are keyed by their wire names (firstName, departmentId, ...).
    """
    errors: Dict[str, str] = {}
    for err in exc.errors():
        loc = list(err["loc"])
        # Defaults validated for missing fields are reported under the Python name
        if loc and loc[0] in ApplicantForm.model_fields:
            loc[0] = ApplicantForm.model_fields[loc[0]].alias or loc[0]
        field = ".".join(str(part) for part in loc) or "form"
        errors.setdefault(field, err["msg"])
    return errors


def validate_application(fields: Mapping[str, Any]) -> ApplicantForm:
    """
    Validate raw form fields, including that the department exists.

    Raises:
        ValidationError with a field -> message mapping
    """
    errors: Dict[str, str] = {}
    form = None
    try:
        form = ApplicantForm.model_validate(dict(fields))
    except PydanticValidationError as exc:
        errors = collect_field_errors(exc)

    # The department lookup runs even when other fields failed, so the
    # user sees every problem at once
    if "departmentId" not in errors:
        if form is not None:
            department_id = form.department_id
        else:
            department_id = parse_department_id(fields.get("departmentId", fields.get("department_id")))
        with get_db_session() as db:
            if not crud.department_exists(db, department_id):
                errors["departmentId"] = "Selected department does not exist"

    if errors:
        raise ValidationError(errors)

    return form


async def submit_application(fields: Mapping[str, Any], resume: Optional[UploadFile] = None) -> Applicant:
    """
    Validate, store the optional resume and create the applicant.

    Args:
        fields: form fields keyed by their wire names (firstName, email, ...)
        resume: optional uploaded file

    Returns:
        The persisted Applicant

    Raises:
        ValidationError, InvalidFile, StoreUnavailable
    """
    try:
        form = validate_application(fields)
    except ValidationError as exc:
        logger.info("Application rejected: %s", exc.errors)
        raise

    content = None
    if has_file(resume):
        content = await read_resume(resume)

    resume_path = save_resume(content, resume.filename) if content is not None else None

    try:
        with get_db_session() as db:
            applicant = crud.create_applicant(
                db, form.model_dump(), resume_path=resume_path
            )
    except Exception:
        if resume_path:
            logger.warning("Applicant insert failed; removing stored resume %s", resume_path)
            remove_resume(resume_path)
        raise

    logger.info("Created applicant %s for department %s", applicant.id, applicant.department_id)
    return applicant


def delete_applicant(applicant_id: int) -> Applicant:
    """
    Delete an applicant and its resume file.
    The row is removed even if the file cannot be deleted.

    Raises:
        NotFound, StoreUnavailable
    """
    with get_db_session() as db:
        applicant = crud.delete_applicant(db, applicant_id)

    if applicant.resume_path:
        remove_resume(applicant.resume_path)

    logger.info("Deleted applicant %s", applicant_id)
    return applicant
