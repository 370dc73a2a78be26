import logging

from sqlalchemy import insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.note import Note
from app.models.note_tag import note_tags
from app.models.notebook import Notebook
from app.models.tag import Tag

logger = logging.getLogger(__name__)

SAMPLE_NOTEBOOKS = [
    {"id": "nb1", "title": "Work Notes", "description": "All work-related notes and documents"},
    {"id": "nb2", "title": "Personal Notes", "description": "Personal thoughts and ideas"},
]

SAMPLE_TAGS = [
    {"id": "tag1", "name": "Important", "color": "#ff4444"},
    {"id": "tag2", "name": "Work", "color": "#4444ff"},
]

SAMPLE_NOTES = [
    {
        "id": "n1",
        "notebook_id": "nb1",
        "title": "Meeting Notes",
        "content": "Discussion points from team meeting...",
        "is_pinned": True,
    },
    {
        "id": "n2",
        "notebook_id": "nb2",
        "title": "Ideas",
        "content": "Random thoughts and ideas...",
        "is_pinned": False,
    },
]

SAMPLE_NOTE_TAGS = [("n1", "tag1"), ("n1", "tag2")]


async def seed_sample_data(db: AsyncSession) -> int:
    """
    Insert the sample notebooks, tags, notes and links that are missing.

    Rows are matched by id, tags also by name, so running this at every
    startup is harmless. Returns the number of rows inserted.
    """
    inserted = 0

    for row in SAMPLE_NOTEBOOKS:
        if await db.get(Notebook, row["id"]) is None:
            db.add(Notebook(**row))
            inserted += 1
    await db.flush()

    for row in SAMPLE_TAGS:
        existing = await db.execute(
            select(Tag.id).where((Tag.id == row["id"]) | (Tag.name == row["name"]))
        )
        if existing.first() is None:
            db.add(Tag(**row))
            inserted += 1
    await db.flush()

    for row in SAMPLE_NOTES:
        if await db.get(Note, row["id"]) is None and await db.get(Notebook, row["notebook_id"]) is not None:
            db.add(Note(**row))
            inserted += 1
    await db.flush()

    for note_id, tag_id in SAMPLE_NOTE_TAGS:
        if await db.get(Note, note_id) is None or await db.get(Tag, tag_id) is None:
            continue
        existing = await db.execute(
            select(note_tags).where(note_tags.c.note_id == note_id, note_tags.c.tag_id == tag_id)
        )
        if existing.first() is None:
            await db.execute(insert(note_tags).values(note_id=note_id, tag_id=tag_id))
            inserted += 1

    await db.commit()
    if inserted:
        logger.info("Inserted %d sample row(s)", inserted)
    return inserted
