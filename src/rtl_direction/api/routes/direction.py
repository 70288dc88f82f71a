"""Text direction lookup endpoints."""
from __future__ import annotations
from fastapi import APIRouter, HTTPException, Query, Request
import structlog

from ...international.locale_detection import default_sources, detect_locale
from ...international.locale_parsing import parse_locale
from ...international.rtl_languages import describe_locale, get_rtl_language_codes
from ...models.locale import DirectionResult, ParsedLocale

logger = structlog.get_logger(__name__)

router = APIRouter()


@router.get("/direction", response_model=DirectionResult)
async def get_direction(locale: str = Query(..., description="Locale or language code, e.g. 'ar-EG'")):
    """Classify a locale as RTL or LTR. Unparseable input resolves to LTR."""
    return describe_locale(locale)


@router.get("/direction/detect", response_model=DirectionResult)
async def detect_direction(request: Request):
    """Classify the ambient locale of the server process."""
    settings = request.app.state.settings
    detected = detect_locale(default_sources(settings))
    logger.info("ambient_locale", locale=detected)
    return describe_locale(detected)


@router.get("/languages")
async def list_rtl_languages():
    """List every language code treated as right-to-left."""
    codes = get_rtl_language_codes()
    return {"codes": list(codes), "count": len(codes)}


@router.get("/locales/parse", response_model=ParsedLocale)
async def parse(locale: str = Query(...)):
    """Split a locale into language and country code."""
    parsed = parse_locale(locale)
    if parsed is None:
        raise HTTPException(status_code=404, detail=f"Unparseable locale: {locale!r}")
    return parsed
