from .notebook import Notebook
from .note import Note
from .tag import Tag
from .note_tag import note_tags

__all__ = ["Notebook", "Note", "Tag", "note_tags"]
