"""
About Us Routes

GET /about - Get the current "about us" content
"""

from fastapi import APIRouter

from satrecruit.db import crud
from satrecruit.db.session import get_db_session
from satrecruit.schemas.schemas import AboutUsResponse

router = APIRouter(prefix="/about", tags=["About"])


@router.get("", response_model=AboutUsResponse)
async def get_about():
    """Current content, or an empty default when nothing was saved yet."""
    with get_db_session() as db:
        about = crud.get_about_us(db)
    if about is None:
        return AboutUsResponse()
    return about
