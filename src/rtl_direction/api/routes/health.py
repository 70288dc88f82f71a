"""Health check endpoint."""
from __future__ import annotations
from fastapi import APIRouter

from ...international.rtl_languages import get_rtl_language_codes

router = APIRouter()


@router.get("/health")
async def health_check():
    """Report liveness and the size of the loaded RTL code set."""
    return {
        "status": "ok",
        "service": "rtl-direction-api",
        "rtl_language_count": len(get_rtl_language_codes()),
    }
