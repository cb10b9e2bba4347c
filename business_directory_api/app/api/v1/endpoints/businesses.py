"""
Business listing endpoints for API v1.

Listing and reading are public.  Creating, replacing and deleting a
listing require a logged-in user, and only the owner of a listing may
change or remove it.
"""

import uuid
from datetime import datetime, timezone
from typing import Dict, List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status

from business_directory_api.app.api.deps import get_directory, get_store, require_user
from business_directory_api.app.schemas.business import (
    Business,
    BusinessCategory,
    BusinessCreate,
    BusinessFilter,
    BusinessUpdate,
    Coordinate,
)
from business_directory_api.app.schemas.user import UserRead
from business_directory_api.app.services.directory_service import DirectoryService
from business_directory_api.app.services.entity_store import EntityStore
from business_directory_api.app.services.seed_service import seed_sample_businesses

router = APIRouter()


def _owned_listing(directory: DirectoryService, business_id: str, user: UserRead) -> Business:
    try:
        business = directory.get(business_id)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
    if business.owner_id != user.id:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Only the owner can modify this business")
    return business


@router.get("/", response_model=List[Business])
async def list_businesses(
    search: str = Query("", description="Text matched against name and description"),
    category: Optional[BusinessCategory] = Query(None),
    sort: Optional[BusinessFilter] = Query(None, description="nearest, top_rated or newest"),
    latitude: Optional[float] = Query(None, ge=-90, le=90),
    longitude: Optional[float] = Query(None, ge=-180, le=180),
    directory: DirectoryService = Depends(get_directory),
) -> List[Business]:
    """Search the directory.

    - **search**, **category**: filters, combined with AND.
    - **sort**: changes the active sort order of the directory.
    - **latitude**, **longitude**: the user's position; sets the
      distance of every listing.  Both or neither must be given.
    """
    if (latitude is None) != (longitude is None):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="latitude and longitude must be given together",
        )
    if latitude is not None:
        directory.set_user_location(Coordinate(latitude=latitude, longitude=longitude))
    if sort is not None:
        directory.select_filter(sort)
    return directory.filtered(search, category)


@router.get("/mine", response_model=List[Business])
async def list_my_businesses(
    user: UserRead = Depends(require_user),
    directory: DirectoryService = Depends(get_directory),
) -> List[Business]:
    """Listings owned by the logged-in user."""
    return directory.owned_by(user.id)


@router.post("/seed")
async def seed_businesses(
    force: bool = Query(False, description="Reload the catalog even if it was loaded before"),
    user: UserRead = Depends(require_user),
    store: EntityStore = Depends(get_store),
) -> Dict[str, int]:
    """Load the sample catalog.  Does nothing the second time unless ``force``.

    Only the catalog listings are written; listings created by users
    are never removed.
    """
    return {"inserted": seed_sample_businesses(store, force=force, keep_owned=True)}


@router.get("/{business_id}", response_model=Business)
async def get_business(
    business_id: str,
    directory: DirectoryService = Depends(get_directory),
) -> Business:
    try:
        return directory.get(business_id)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e


@router.post("/", response_model=Business, status_code=status.HTTP_201_CREATED)
async def create_business(
    payload: BusinessCreate,
    user: UserRead = Depends(require_user),
    directory: DirectoryService = Depends(get_directory),
) -> Business:
    """Add a listing owned by the logged-in user.

    A listing without images gets the default image of its category.
    """
    now = datetime.now(timezone.utc)
    business = Business(
        **payload.model_dump(),
        id=str(uuid.uuid4()),
        owner_id=user.id,
        rating=0.0,
        review_count=0,
        created_at=now,
        updated_at=now,
    )
    return directory.add(business)


@router.put("/{business_id}", response_model=Business)
async def replace_business(
    business_id: str,
    payload: BusinessUpdate,
    user: UserRead = Depends(require_user),
    directory: DirectoryService = Depends(get_directory),
) -> Business:
    """Replace every editable field of a listing.

    Rating, review count and creation time are kept.
    """
    existing = _owned_listing(directory, business_id, user)
    business = Business(
        **payload.model_dump(),
        id=existing.id,
        owner_id=existing.owner_id,
        rating=existing.rating,
        review_count=existing.review_count,
        created_at=existing.created_at,
        updated_at=datetime.now(timezone.utc),
    )
    return directory.update(business)


@router.delete("/{business_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_business(
    business_id: str,
    user: UserRead = Depends(require_user),
    directory: DirectoryService = Depends(get_directory),
) -> None:
    existing = _owned_listing(directory, business_id, user)
    directory.delete(existing)
    return None
