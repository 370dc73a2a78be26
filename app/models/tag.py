from sqlalchemy import Column, String
from sqlalchemy.orm import relationship
from app.core.database import Base
from app.models.base import new_id


class Tag(Base):
    __tablename__ = "tags"

    id = Column(String(36), primary_key=True, default=new_id)
    name = Column(String(50), unique=True, nullable=False, index=True)
    color = Column(String(32), nullable=False)

    # Relationship to notes through association table
    notes = relationship("Note", secondary="note_tags", back_populates="tags")
