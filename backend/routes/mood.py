from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, Query
from fastapi.encoders import jsonable_encoder

from backend.auth import require_user
from backend.schemas import EntriesResponse, MoodEntryCreate, MoodEntryPatch, MoodEntryResponse
from backend import repositories

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/v1/mood_entries", response_model=EntriesResponse)
async def list_mood_entries(
    order: str = Query("created_at"),
    ascending: bool = Query(False),
    user: dict = Depends(require_user),
):
    try:
        items = await repositories.list_mood_entries(user["id"], order=order, ascending=ascending)
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc))
    return {"items": jsonable_encoder(items)}


@router.post("/v1/mood_entries", response_model=MoodEntryResponse)
async def create_mood_entry(payload: MoodEntryCreate, user: dict = Depends(require_user)):
    record = await repositories.create_mood_entry(user["id"], payload.model_dump())
    logger.debug("Created mood entry %s for %s", record["id"], user["id"])
    return jsonable_encoder(record)


@router.patch("/v1/mood_entries/{entry_id}", response_model=MoodEntryResponse)
async def patch_mood_entry(entry_id: str, payload: MoodEntryPatch, user: dict = Depends(require_user)):
    patch = payload.model_dump(exclude_unset=True)
    if not patch:
        raise HTTPException(status_code=400, detail="No changes provided")
    record = await repositories.update_mood_entry(user["id"], entry_id, patch)
    if not record:
        raise HTTPException(status_code=404, detail="Mood entry not found")
    return jsonable_encoder(record)
