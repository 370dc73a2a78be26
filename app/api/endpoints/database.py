from typing import List
from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.database import get_db
from app.crud.introspection import dump_tables
from app.schemas.database import TableDump

router = APIRouter()


@router.get("/tables", response_model=List[TableDump])
async def get_tables(db: AsyncSession = Depends(get_db)):
    """Dump the schema and rows of every table (diagnostics)"""
    return await dump_tables(db)
