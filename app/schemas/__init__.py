from .message import MessageResponse
from .notebook import NotebookCreate, NotebookUpdate, NotebookResponse, NotebookCreated
from .tag import TagCreate, TagUpdate, TagResponse, TagCreated
from .note import NoteResponse, NoteCreated, SearchResultResponse
from .database import TableDump

__all__ = [
    "MessageResponse",
    "NotebookCreate", "NotebookUpdate", "NotebookResponse", "NotebookCreated",
    "TagCreate", "TagUpdate", "TagResponse", "TagCreated",
    "NoteResponse", "NoteCreated", "SearchResultResponse",
    "TableDump",
]
