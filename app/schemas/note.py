from pydantic import BaseModel
from datetime import datetime
from typing import Optional, List

from .tag import TagResponse


class NoteResponse(BaseModel):
    id: str
    notebook_id: str
    title: str
    content: Optional[str] = None
    is_pinned: bool
    pdf_path: Optional[str] = None
    created_at: datetime
    updated_at: datetime
    tags: List[TagResponse] = []

    class Config:
        from_attributes = True


class SearchResultResponse(NoteResponse):
    notebook_title: Optional[str] = None


class NoteCreated(BaseModel):
    message: str
    note_id: str
