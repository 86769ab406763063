from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, Query
from fastapi.encoders import jsonable_encoder

from backend.auth import require_user
from backend.schemas import EntriesResponse, FinancialEntryCreate, FinancialEntryResponse
from backend import repositories

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/v1/financial_entries", response_model=EntriesResponse)
async def list_financial_entries(
    order: str = Query("date"),
    ascending: bool = Query(False),
    user: dict = Depends(require_user),
):
    try:
        items = await repositories.list_financial_entries(user["id"], order=order, ascending=ascending)
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc))
    return {"items": jsonable_encoder(items)}


@router.post("/v1/financial_entries", response_model=FinancialEntryResponse)
async def create_financial_entry(payload: FinancialEntryCreate, user: dict = Depends(require_user)):
    record = await repositories.create_financial_entry(user["id"], payload.model_dump())
    logger.debug("Created %s entry %s for %s", record["type"], record["id"], user["id"])
    return jsonable_encoder(record)
