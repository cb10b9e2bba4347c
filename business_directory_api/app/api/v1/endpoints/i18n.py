"""
Localization endpoint for API v1.

Returns the whole translation table for the request language so a
client can render its screens without shipping its own strings.
"""

from typing import Any, Dict

from fastapi import APIRouter, Depends

from business_directory_api.app.api.deps import get_language
from business_directory_api.app.core.localization import Language, table

router = APIRouter()


@router.get("/", response_model=Dict[str, Any])
async def get_translations(language: Language = Depends(get_language)) -> Dict[str, Any]:
    return {"language": language.value, "strings": table(language)}
