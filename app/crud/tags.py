import logging
from typing import List, Optional, Tuple

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from app.core.exceptions import ConflictError, NotFoundError, ValidationError
from app.models.tag import Tag

logger = logging.getLogger(__name__)

DUPLICATE_NAME_MESSAGE = "Tag name already exists"


def _require_name_and_color(name: Optional[str], color: Optional[str]) -> Tuple[str, str]:
    if not name or not name.strip() or not color or not color.strip():
        raise ValidationError("Tag name and color are required")
    return name, color


async def _commit_unique_name(db: AsyncSession) -> None:
    """Commit, turning a violated unique name constraint into a ConflictError"""
    try:
        await db.commit()
    except IntegrityError as e:
        await db.rollback()
        logger.info("Rejected duplicate tag name: %s", e.orig)
        raise ConflictError(DUPLICATE_NAME_MESSAGE) from e


async def list_tags(db: AsyncSession) -> List[Tag]:
    result = await db.execute(select(Tag).order_by(Tag.name))
    return list(result.scalars().all())


async def create_tag(name: Optional[str], color: Optional[str], db: AsyncSession) -> str:
    """Create a tag and return its id"""
    name, color = _require_name_and_color(name, color)

    tag = Tag(name=name, color=color)
    db.add(tag)
    await _commit_unique_name(db)
    return tag.id


async def update_tag(tag_id: str, name: Optional[str], color: Optional[str], db: AsyncSession) -> Tag:
    name, color = _require_name_and_color(name, color)

    tag = await db.get(Tag, tag_id)
    if tag is None:
        raise NotFoundError("Tag not found")

    tag.name = name
    tag.color = color
    await _commit_unique_name(db)
    return tag


async def delete_tag(tag_id: str, db: AsyncSession) -> None:
    """Unlink the tag from every note, then delete it"""
    result = await db.execute(
        select(Tag).options(selectinload(Tag.notes)).where(Tag.id == tag_id)
    )
    tag = result.scalar_one_or_none()

    if tag is None:
        raise NotFoundError("Tag not found")

    await db.delete(tag)
    await db.commit()


async def get_tags_by_ids(tag_ids: List[str], db: AsyncSession) -> List[Tag]:
    """
    Resolve tag ids to Tag objects, in input order and without duplicates.

    Raises ValidationError naming any id that matches no tag.
    """
    unique_ids = list(dict.fromkeys(tag_ids))
    if not unique_ids:
        return []

    result = await db.execute(select(Tag).where(Tag.id.in_(unique_ids)))
    found = {tag.id: tag for tag in result.scalars().all()}

    missing = [tag_id for tag_id in unique_ids if tag_id not in found]
    if missing:
        raise ValidationError(f"Unknown tag id(s): {', '.join(missing)}")

    return [found[tag_id] for tag_id in unique_ids]
