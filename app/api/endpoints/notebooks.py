from typing import List
from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.endpoints.notes import to_note_response
from app.core.database import get_db
from app.crud import notebooks as crud
from app.crud.notes import list_notes_by_notebook
from app.schemas.message import MessageResponse
from app.schemas.note import NoteResponse
from app.schemas.notebook import NotebookCreate, NotebookUpdate, NotebookResponse, NotebookCreated

router = APIRouter()


@router.get("", response_model=List[NotebookResponse])
async def get_notebooks(db: AsyncSession = Depends(get_db)):
    """Get all notebooks, most recently updated first"""
    return await crud.list_notebooks(db)


@router.post("", response_model=NotebookCreated, status_code=status.HTTP_201_CREATED)
async def create_notebook(notebook: NotebookCreate, db: AsyncSession = Depends(get_db)):
    """Create a new notebook"""
    notebook_id = await crud.create_notebook(notebook.title, notebook.description, db)
    return NotebookCreated(message="Notebook created successfully", notebook_id=notebook_id)


@router.put("/{notebook_id}", response_model=MessageResponse)
async def update_notebook(
    notebook_id: str,
    notebook_update: NotebookUpdate,
    db: AsyncSession = Depends(get_db)
):
    """Update a notebook's title and description"""
    await crud.update_notebook(notebook_id, notebook_update.title, notebook_update.description, db)
    return {"message": "Notebook updated successfully"}


@router.delete("/{notebook_id}", response_model=MessageResponse)
async def delete_notebook(notebook_id: str, db: AsyncSession = Depends(get_db)):
    """Delete a notebook and every note in it"""
    await crud.delete_notebook(notebook_id, db)
    return {"message": "Notebook deleted successfully"}


@router.get("/{notebook_id}/notes", response_model=List[NoteResponse])
async def get_notebook_notes(notebook_id: str, db: AsyncSession = Depends(get_db)):
    """Get the notes of a notebook with their tags, pinned notes first"""
    entries = await list_notes_by_notebook(notebook_id, db)
    return [to_note_response(entry) for entry in entries]
