import logging
from typing import List, Optional
from fastapi import APIRouter, Depends, File, Form, UploadFile, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.database import get_db
from app.core.exceptions import NotesError
from app.core.storage import AttachmentStorage, get_storage
from app.crud import notes as crud
from app.crud.notes import NoteWithTags
from app.schemas.message import MessageResponse
from app.schemas.note import NoteResponse, NoteCreated
from app.schemas.tag import TagResponse

logger = logging.getLogger(__name__)

router = APIRouter()


def to_note_response(entry: NoteWithTags, response_class=NoteResponse):
    """Convert a grouped note row to its response model"""
    note = entry.note
    extra = {}
    if entry.notebook_title is not None:
        extra["notebook_title"] = entry.notebook_title

    return response_class(
        id=note.id,
        notebook_id=note.notebook_id,
        title=note.title,
        content=note.content,
        is_pinned=note.is_pinned,
        pdf_path=note.pdf_path,
        created_at=note.created_at,
        updated_at=note.updated_at,
        tags=[TagResponse.model_validate(tag) for tag in entry.tags],
        **extra
    )


def collect_tag_ids(*fields: Optional[List[str]]) -> Optional[List[str]]:
    """
    Merge the tag id form fields.

    None means no tag field was sent at all. Empty values are dropped, so a
    single empty tag_ids value yields [] and clears the tag set.
    """
    sent = [values for values in fields if values is not None]
    if not sent:
        return None
    return [tag_id for values in sent for tag_id in values if tag_id]


async def _store_pdf(pdf: Optional[UploadFile], storage: AttachmentStorage) -> Optional[str]:
    if pdf is None or not pdf.filename:
        return None
    return await storage.save_pdf(pdf)


@router.post("", response_model=NoteCreated, status_code=status.HTTP_201_CREATED)
async def create_note(
    notebook_id: Optional[str] = Form(None),
    title: Optional[str] = Form(None),
    content: Optional[str] = Form(None),
    is_pinned: bool = Form(False),
    tag_ids: Optional[List[str]] = Form(None),
    tag_ids_array: Optional[List[str]] = Form(None, alias="tag_ids[]"),
    pdf: Optional[UploadFile] = File(None),
    db: AsyncSession = Depends(get_db),
    storage: AttachmentStorage = Depends(get_storage)
):
    """Create a note from a multipart form, with optional tags and PDF"""
    pdf_path = await _store_pdf(pdf, storage)

    try:
        note_id = await crud.create_note(
            notebook_id,
            title,
            content,
            is_pinned,
            collect_tag_ids(tag_ids, tag_ids_array),
            pdf_path,
            db
        )
    except NotesError:
        # Nothing references the file once the insert is refused
        if pdf_path:
            storage.remove(pdf_path)
        raise

    return NoteCreated(message="Note created successfully", note_id=note_id)


@router.put("/{note_id}", response_model=MessageResponse)
async def update_note(
    note_id: str,
    title: Optional[str] = Form(None),
    content: Optional[str] = Form(None),
    is_pinned: bool = Form(False),
    tag_ids: Optional[List[str]] = Form(None),
    tag_ids_array: Optional[List[str]] = Form(None, alias="tag_ids[]"),
    pdf: Optional[UploadFile] = File(None),
    db: AsyncSession = Depends(get_db),
    storage: AttachmentStorage = Depends(get_storage)
):
    """Update a note; tags are replaced only when tag_ids is sent"""
    pdf_path = await _store_pdf(pdf, storage)

    try:
        await crud.update_note(
            note_id,
            title,
            content,
            is_pinned,
            db,
            tag_ids=collect_tag_ids(tag_ids, tag_ids_array),
            pdf_path=pdf_path
        )
    except NotesError:
        if pdf_path:
            storage.remove(pdf_path)
        raise

    return {"message": "Note updated successfully"}


@router.delete("/{note_id}", response_model=MessageResponse)
async def delete_note(note_id: str, db: AsyncSession = Depends(get_db)):
    """Delete a note and its tag links"""
    await crud.delete_note(note_id, db)
    return {"message": "Note deleted successfully"}
