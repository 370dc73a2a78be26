from typing import List
from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.database import get_db
from app.crud import tags as crud
from app.schemas.message import MessageResponse
from app.schemas.tag import TagCreate, TagUpdate, TagResponse, TagCreated

router = APIRouter()


@router.get("", response_model=List[TagResponse])
async def get_tags(db: AsyncSession = Depends(get_db)):
    """Get all tags ordered by name"""
    return await crud.list_tags(db)


@router.post("", response_model=TagCreated, status_code=status.HTTP_201_CREATED)
async def create_tag(tag: TagCreate, db: AsyncSession = Depends(get_db)):
    """Create a new tag; names are unique"""
    tag_id = await crud.create_tag(tag.name, tag.color, db)
    return TagCreated(message="Tag created successfully", tag_id=tag_id)


@router.put("/{tag_id}", response_model=MessageResponse)
async def update_tag(tag_id: str, tag_update: TagUpdate, db: AsyncSession = Depends(get_db)):
    await crud.update_tag(tag_id, tag_update.name, tag_update.color, db)
    return {"message": "Tag updated successfully"}


@router.delete("/{tag_id}", response_model=MessageResponse)
async def delete_tag(tag_id: str, db: AsyncSession = Depends(get_db)):
    """Delete a tag, removing it from every note"""
    await crud.delete_tag(tag_id, db)
    return {"message": "Tag deleted successfully"}
