from pydantic import BaseModel
from datetime import datetime
from typing import Optional


class NotebookBase(BaseModel):
    # Presence is checked by the access layer so a missing title answers 400
    title: Optional[str] = None
    description: Optional[str] = None


class NotebookCreate(NotebookBase):
    pass


class NotebookUpdate(NotebookBase):
    pass


class NotebookResponse(BaseModel):
    id: str
    title: str
    description: Optional[str] = None
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


class NotebookCreated(BaseModel):
    message: str
    notebook_id: str
