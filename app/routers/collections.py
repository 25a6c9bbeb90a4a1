from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, status

from app.core.deps import get_trip_session
from app.core.messages import notice_message
from app.routers.places import _to_place_response
from app.schemas.collections import (
    Collection,
    CollectionDetailResponse,
    CollectionListResponse,
    CollectionResponse,
    CommentUpdate,
)
from app.schemas.places import ActionResponse
from app.services.collections import collection_places, find_collection, total_unique_places
from app.services.session import TripSession

router = APIRouter(prefix="/collections", tags=["collections"])


def _to_collection_response(collection: Collection, session: TripSession) -> CollectionResponse:
    return CollectionResponse(
        id=collection.id,
        title=collection.title,
        description=collection.description,
        category=collection.category,
        image=collection.image,
        places_count=len(collection_places(collection, session.catalog)),
        user_comment=session.comments.get(collection.id),
    )


def _get_collection(collection_id: str, session: TripSession) -> Collection:
    collection = find_collection(session.collections, collection_id)
    if not collection:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Collection not found")
    return collection


@router.get("", response_model=CollectionListResponse)
def list_collections(session: TripSession = Depends(get_trip_session)) -> CollectionListResponse:
    items = [_to_collection_response(c, session) for c in session.collections]
    return CollectionListResponse(
        items=items,
        total=len(items),
        unique_places=total_unique_places(session.collections, session.catalog),
    )


@router.get("/{collection_id}", response_model=CollectionDetailResponse)
def get_collection(collection_id: str, session: TripSession = Depends(get_trip_session)) -> CollectionDetailResponse:
    collection = _get_collection(collection_id, session)
    base = _to_collection_response(collection, session)
    places = [
        _to_place_response(p, in_route=session.in_route(p.id))
        for p in collection_places(collection, session.catalog)
    ]
    return CollectionDetailResponse(**base.model_dump(), places=places)


@router.put("/{collection_id}/comment", response_model=ActionResponse)
def put_comment(
    collection_id: str,
    payload: CommentUpdate,
    session: TripSession = Depends(get_trip_session),
) -> ActionResponse:
    _get_collection(collection_id, session)
    notice = session.add_collection_comment(collection_id, payload.text)
    if notice is None:
        return ActionResponse(changed=False)
    return ActionResponse(changed=notice.changed, kind=notice.kind, message=notice_message(notice))
