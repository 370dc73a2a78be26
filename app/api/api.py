from fastapi import APIRouter
from app.api.endpoints import notebooks, notes, tags, search, database

api_router = APIRouter()

api_router.include_router(notebooks.router, prefix="/notebooks", tags=["notebooks"])
api_router.include_router(notes.router, prefix="/notes", tags=["notes"])
api_router.include_router(tags.router, prefix="/tags", tags=["tags"])
api_router.include_router(search.router, prefix="/search", tags=["search"])
api_router.include_router(database.router, prefix="/database", tags=["database"])
