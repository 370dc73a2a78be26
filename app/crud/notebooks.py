import logging
from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from app.core.exceptions import NotFoundError, ValidationError
from app.models.base import utcnow
from app.models.note import Note
from app.models.notebook import Notebook

logger = logging.getLogger(__name__)


def _require_title(title: Optional[str]) -> str:
    if not title or not title.strip():
        raise ValidationError("Title is required")
    return title


async def list_notebooks(db: AsyncSession) -> List[Notebook]:
    """All notebooks, most recently updated first"""
    result = await db.execute(
        select(Notebook).order_by(Notebook.updated_at.desc(), Notebook.title)
    )
    return list(result.scalars().all())


async def create_notebook(title: Optional[str], description: Optional[str], db: AsyncSession) -> str:
    """Create a notebook and return its id"""
    notebook = Notebook(title=_require_title(title), description=description)
    db.add(notebook)
    await db.commit()
    return notebook.id


async def update_notebook(
    notebook_id: str, title: Optional[str], description: Optional[str], db: AsyncSession
) -> Notebook:
    title = _require_title(title)

    notebook = await db.get(Notebook, notebook_id)
    if notebook is None:
        raise NotFoundError("Notebook not found")

    notebook.title = title
    notebook.description = description
    notebook.updated_at = utcnow()
    await db.commit()
    return notebook


async def delete_notebook(notebook_id: str, db: AsyncSession) -> None:
    """Delete a notebook together with its notes and their tag links"""
    result = await db.execute(
        select(Notebook)
        .options(selectinload(Notebook.notes).selectinload(Note.tags))
        .where(Notebook.id == notebook_id)
    )
    notebook = result.scalar_one_or_none()

    if notebook is None:
        raise NotFoundError("Notebook not found")

    note_count = len(notebook.notes)
    await db.delete(notebook)
    await db.commit()
    logger.info("Deleted notebook %s with %d note(s)", notebook_id, note_count)
