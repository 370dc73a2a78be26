import logging
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional

from sqlalchemy import or_, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from app.core.exceptions import NotFoundError, ValidationError
from app.crud.tags import get_tags_by_ids
from app.models.base import utcnow
from app.models.note import Note
from app.models.notebook import Notebook
from app.models.tag import Tag

logger = logging.getLogger(__name__)


@dataclass
class NoteWithTags:
    """A note row plus the tags linked to it"""
    note: Note
    tags: List[Tag] = field(default_factory=list)
    notebook_title: Optional[str] = None


def group_tags(rows: Iterable) -> List[NoteWithTags]:
    """
    Fold (note, tag, *extra) join rows into one entry per note.

    Rows come from an outer join, so a note without tags shows up once with
    tag None. Notes keep the order in which they first appear. A third column,
    when present, is taken as the notebook title.
    """
    grouped: Dict[str, NoteWithTags] = {}
    for row in rows:
        note, tag = row[0], row[1]
        entry = grouped.get(note.id)
        if entry is None:
            entry = NoteWithTags(note=note, notebook_title=row[2] if len(row) > 2 else None)
            grouped[note.id] = entry
        if tag is not None:
            entry.tags.append(tag)
    return list(grouped.values())


async def list_notes_by_notebook(notebook_id: str, db: AsyncSession) -> List[NoteWithTags]:
    """Notes of a notebook, pinned first, then most recently updated"""
    result = await db.execute(
        select(Note, Tag)
        .outerjoin(Note.tags)
        .where(Note.notebook_id == notebook_id)
        .order_by(Note.is_pinned.desc(), Note.updated_at.desc(), Note.id, Tag.name)
    )
    return group_tags(result.all())


async def search_notes(query: Optional[str], db: AsyncSession) -> List[NoteWithTags]:
    """Substring match on note title or content, most recently updated first"""
    if not query or not query.strip():
        raise ValidationError("Search query is required")

    result = await db.execute(
        select(Note, Tag, Notebook.title)
        .join(Note.notebook)
        .outerjoin(Note.tags)
        .where(
            or_(
                Note.title.contains(query, autoescape=True),
                Note.content.contains(query, autoescape=True),
            )
        )
        .order_by(Note.updated_at.desc(), Note.id, Tag.name)
    )
    return group_tags(result.all())


async def create_note(
    notebook_id: Optional[str],
    title: Optional[str],
    content: Optional[str],
    is_pinned: bool,
    tag_ids: Optional[List[str]],
    pdf_path: Optional[str],
    db: AsyncSession,
) -> str:
    """Create a note with its tag links in one transaction and return its id"""
    if not notebook_id or not title or not title.strip():
        raise ValidationError("Notebook ID and title are required")

    if await db.get(Notebook, notebook_id) is None:
        raise NotFoundError("Notebook not found")

    db_note = Note(
        notebook_id=notebook_id,
        title=title,
        content=content,
        is_pinned=bool(is_pinned),
        pdf_path=pdf_path,
    )
    db_note.tags = await get_tags_by_ids(tag_ids or [], db)

    db.add(db_note)
    await db.commit()
    logger.debug("Created note %s in notebook %s with %d tag(s)", db_note.id, notebook_id, len(db_note.tags))
    return db_note.id


async def update_note(
    note_id: str,
    title: Optional[str],
    content: Optional[str],
    is_pinned: bool,
    db: AsyncSession,
    tag_ids: Optional[List[str]] = None,
    pdf_path: Optional[str] = None,
) -> Note:
    """
    Update a note's fields.

    tag_ids=None keeps the current tags; any list, even an empty one,
    replaces them. pdf_path=None keeps the current attachment.
    """
    if not title or not title.strip():
        raise ValidationError("Title is required")

    result = await db.execute(
        select(Note).options(selectinload(Note.tags)).where(Note.id == note_id)
    )
    note = result.scalar_one_or_none()

    if note is None:
        raise NotFoundError("Note not found")

    note.title = title
    note.content = content
    note.is_pinned = bool(is_pinned)
    note.updated_at = utcnow()

    if pdf_path:
        note.pdf_path = pdf_path

    if tag_ids is not None:
        note.tags = await get_tags_by_ids(tag_ids, db)

    await db.commit()
    return note


async def delete_note(note_id: str, db: AsyncSession) -> None:
    """Remove the note's tag links and the note itself"""
    result = await db.execute(
        select(Note).options(selectinload(Note.tags)).where(Note.id == note_id)
    )
    note = result.scalar_one_or_none()

    if note is None:
        raise NotFoundError("Note not found")

    await db.delete(note)
    await db.commit()
