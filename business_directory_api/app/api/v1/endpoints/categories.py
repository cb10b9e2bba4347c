"""
Category endpoint for API v1.

Lists the five business categories with their localized name, icon and
the image substituted for listings saved without images.
"""

from typing import Dict, List

from fastapi import APIRouter, Depends

from business_directory_api.app.api.deps import get_language
from business_directory_api.app.core.localization import Language
from business_directory_api.app.schemas.business import BusinessCategory, default_image_for

router = APIRouter()


@router.get("/", response_model=List[Dict[str, str]])
async def list_categories(language: Language = Depends(get_language)) -> List[Dict[str, str]]:
    return [
        {
            "value": category.value,
            "name": category.localized_name(language),
            "icon": category.icon,
            "default_image": default_image_for(category),
        }
        for category in BusinessCategory
    ]
