from pydantic import BaseModel
from typing import Any, Dict, List


class TableDump(BaseModel):
    table_name: str
    table_schema: str
    rows: List[Dict[str, Any]] = []
