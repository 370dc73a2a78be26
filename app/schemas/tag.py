from pydantic import BaseModel
from typing import Optional


class TagBase(BaseModel):
    name: Optional[str] = None
    color: Optional[str] = None


class TagCreate(TagBase):
    pass


class TagUpdate(TagBase):
    pass


class TagResponse(BaseModel):
    id: str
    name: str
    color: str

    class Config:
        from_attributes = True


class TagCreated(BaseModel):
    message: str
    tag_id: str
