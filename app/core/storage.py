import logging
import uuid
from pathlib import Path

from fastapi import Request, UploadFile

from app.core.exceptions import ValidationError

logger = logging.getLogger(__name__)

PDF_CONTENT_TYPE = "application/pdf"


class AttachmentStorage:
    """Stores uploaded PDFs on disk under generated unique file names."""

    def __init__(self, directory: str):
        self.directory = Path(directory)

    def ensure_directory(self) -> None:
        self.directory.mkdir(parents=True, exist_ok=True)

    async def save_pdf(self, upload: UploadFile) -> str:
        """Write the upload to disk and return the stored file name"""
        if upload.content_type != PDF_CONTENT_TYPE:
            raise ValidationError("Only PDF files are allowed")

        filename = f"{uuid.uuid4()}{Path(upload.filename or '').suffix}"
        data = await upload.read()

        self.ensure_directory()
        (self.directory / filename).write_bytes(data)
        logger.info("Stored attachment %s (%d bytes)", filename, len(data))
        return filename

    def remove(self, filename: str) -> None:
        """Delete a stored file; a missing file is ignored"""
        (self.directory / filename).unlink(missing_ok=True)


def get_storage(request: Request) -> AttachmentStorage:
    return request.app.state.storage
