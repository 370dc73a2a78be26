from typing import List, Optional
from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.endpoints.notes import to_note_response
from app.core.database import get_db
from app.crud.notes import search_notes
from app.schemas.note import SearchResultResponse

router = APIRouter()


@router.get("", response_model=List[SearchResultResponse])
async def search(
    query: Optional[str] = Query(None, description="Search text in title and content"),
    db: AsyncSession = Depends(get_db)
):
    """Search notes across all notebooks"""
    entries = await search_notes(query, db)
    return [to_note_response(entry, SearchResultResponse) for entry in entries]
