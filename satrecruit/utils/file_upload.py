"""
File Upload Utility - validate and store resume files.

Supported formats:
- PDF  (application/pdf)
- DOC  (application/msword)
- DOCX (application/vnd.openxmlformats-officedocument.wordprocessingml.document)

Max file size: MAX_RESUME_SIZE_MB (10MB by default)

Stored resumes are referenced in the database as "uploads/<file name>".
That reference is always resolved against the configured UPLOAD_DIR, both
when writing and when serving/deleting, so the two can never drift apart.
"""

import logging
import os
import re
import secrets
import time
from pathlib import Path
from typing import Optional

from fastapi import UploadFile

from satrecruit.core.config import get_settings
from satrecruit.core.exceptions import InvalidFile

logger = logging.getLogger(__name__)

RESUME_PATH_PREFIX = "uploads"

ALLOWED_MIME_TYPES = {
    "application/pdf": ".pdf",
    "application/msword": ".doc",
    "application/vnd.openxmlformats-officedocument.wordprocessingml.document": ".docx",
}

_UNSAFE_CHARS = re.compile(r"[^A-Za-z0-9._-]+")


def has_file(file: Optional[UploadFile]) -> bool:
    """Browsers send an empty file part when no file was chosen."""
    return file is not None and bool(file.filename)


async def read_resume(file: UploadFile) -> bytes:
    """
    Validate type and size of an uploaded resume and return its bytes.

    Raises:
        InvalidFile on wrong MIME type or oversize content
    """
    settings = get_settings()
    content_type = (file.content_type or "").split(";")[0].strip().lower()
    if content_type not in ALLOWED_MIME_TYPES:
        raise InvalidFile("Invalid file type. Only PDF, DOC, and DOCX files are allowed.")

    # Read one byte past the limit so oversize files are detected without
    # loading arbitrarily large uploads into memory
    limit = settings.max_resume_size_bytes
    content = await file.read(limit + 1)
    if len(content) > limit:
        raise InvalidFile(f"File too large. Maximum size: {settings.max_resume_size_mb}MB")

    return content


def safe_filename(original: str) -> str:
    """Strip directories and unsafe characters from a client-supplied name."""
    name = os.path.basename(original.replace("\\", "/"))
    name = _UNSAFE_CHARS.sub("_", name).strip("._")
    return name or "resume"


def build_storage_name(original: str) -> str:
    """Collision-resistant name: <epoch ms>-<random hex>-<original name>."""
    return f"{int(time.time() * 1000)}-{secrets.token_hex(4)}-{safe_filename(original)}"


def resolve_resume_path(resume_path: str) -> Path:
    """Map a stored "uploads/<name>" reference to its absolute file path."""
    name = Path(resume_path.replace("\\", "/")).name
    if not name:
        raise ValueError(f"Invalid resume path: {resume_path!r}")
    return get_settings().upload_path / name


def ensure_upload_dir() -> Path:
    path = get_settings().upload_path
    path.mkdir(parents=True, exist_ok=True)
    return path


def save_resume(content: bytes, original_filename: str) -> str:
    """
    Write resume bytes to the upload directory.

    Returns:
        The relative reference to store in applicants.resume_path
    """
    upload_dir = ensure_upload_dir()
    name = build_storage_name(original_filename)
    target = upload_dir / name

    # "xb" fails instead of overwriting if two uploads ever pick the same name
    with open(target, "xb") as fh:
        fh.write(content)

    logger.info("Stored resume %s (%d bytes)", name, len(content))
    return f"{RESUME_PATH_PREFIX}/{name}"


def remove_resume(resume_path: Optional[str]) -> bool:
    """
    Delete a stored resume. Failures are logged, never raised.
    Returns True if a file was removed.
    """
    if not resume_path:
        return False

    try:
        path = resolve_resume_path(resume_path)
        if not path.exists():
            logger.warning("Resume file %s already missing", path)
            return False
        path.unlink()
    except (OSError, ValueError):
        logger.warning("Could not remove resume file %s", resume_path, exc_info=True)
        return False

    logger.info("Removed resume file %s", path)
    return True


def get_supported_formats() -> dict:
    """Get info about supported file formats."""
    return {
        "supported_formats": [
            {"extension": ext, "mime_type": mime} for mime, ext in ALLOWED_MIME_TYPES.items()
        ],
        "max_size_mb": get_settings().max_resume_size_mb,
    }
