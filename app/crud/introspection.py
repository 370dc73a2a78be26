from typing import Any, Dict, List

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.schema import CreateTable

from app.core.database import Base


async def dump_tables(db: AsyncSession) -> List[Dict[str, Any]]:
    """Schema DDL and every row of every mapped table (diagnostics only)"""
    dialect = db.get_bind().dialect

    tables = []
    for table in Base.metadata.sorted_tables:
        result = await db.execute(select(table))
        tables.append({
            "table_name": table.name,
            "table_schema": str(CreateTable(table).compile(dialect=dialect)).strip(),
            "rows": [dict(row._mapping) for row in result],
        })
    return tables
