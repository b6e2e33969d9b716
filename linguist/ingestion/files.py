"""Upload classification and preparation.

Only plain text is read locally. PDFs, images and other binaries travel to the
remote model as inline base64 payloads; PDFs get a placeholder marker for
display and images a data: URL preview.
"""

import base64
import logging
import mimetypes
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from linguist.config import MAX_UPLOAD_BYTES
from linguist.errors import ReadError, SizeLimitExceeded

logger = logging.getLogger(__name__)

TEXT_EXTENSIONS = {".txt", ".md", ".csv"}
TEXT_MIME_TYPES = {"text/plain", "text/markdown", "text/csv"}
DEFAULT_MIME_TYPE = "application/octet-stream"


class ContentKind(str, Enum):
    TEXT = "text"
    PDF = "pdf"
    IMAGE = "image"
    BINARY = "binary"


@dataclass
class UploadedFile:
    """A user-supplied artifact."""

    name: str
    size: int
    mime_type: str
    content: bytes

    @property
    def extension(self) -> str:
        return Path(self.name).suffix.lower()

    @classmethod
    def from_bytes(cls, name: str, content: bytes, mime_type: str | None = None) -> "UploadedFile":
        return cls(
            name=name,
            size=len(content),
            mime_type=mime_type or guess_mime_type(name),
            content=content,
        )

    @classmethod
    def from_path(
        cls,
        path: str | Path,
        mime_type: str | None = None,
        max_bytes: int = MAX_UPLOAD_BYTES,
    ) -> "UploadedFile":
        """
        Read a local file. The mime type is guessed from the extension if not given.

        Raises:
            SizeLimitExceeded: If the file on disk is larger than max_bytes. The
                content is not read in that case.
        """
        path = Path(path)
        size = path.stat().st_size
        if size > max_bytes:
            logger.warning(f"Rejected {path.name}: {size} bytes > {max_bytes}")
            raise SizeLimitExceeded(path.name, size, max_bytes)
        return cls.from_bytes(path.name, path.read_bytes(), mime_type)


@dataclass
class PreparedUpload:
    """Upload ready for submission: either text or a base64 payload."""

    name: str
    kind: ContentKind
    mime_type: str
    text: str | None = None
    payload: str | None = None
    preview: str | None = None

    @property
    def is_text(self) -> bool:
        return self.text is not None and self.payload is None


def guess_mime_type(name: str) -> str:
    ext = Path(name).suffix.lower()
    if ext == ".md":
        return "text/markdown"
    guessed, _ = mimetypes.guess_type(name)
    return guessed or DEFAULT_MIME_TYPE


def classify(file: UploadedFile) -> ContentKind:
    """Classify by declared content type, then by extension."""
    mime = (file.mime_type or "").lower()
    ext = file.extension

    if mime in TEXT_MIME_TYPES or ext in TEXT_EXTENSIONS:
        return ContentKind.TEXT
    if mime == "application/pdf" or ext == ".pdf":
        return ContentKind.PDF
    if mime.startswith("image/"):
        return ContentKind.IMAGE
    return ContentKind.BINARY


def check_size(file: UploadedFile, max_bytes: int = MAX_UPLOAD_BYTES) -> None:
    """Raise SizeLimitExceeded if the artifact is larger than max_bytes."""
    size = max(file.size, len(file.content))
    if size > max_bytes:
        logger.warning(f"Rejected {file.name}: {size} bytes > {max_bytes}")
        raise SizeLimitExceeded(file.name, size, max_bytes)


def pdf_placeholder(file: UploadedFile) -> str:
    return (
        f"[PDF file {file.name} loaded. Its text is extracted by the model "
        "during translation.]"
    )


def extract_text(file: UploadedFile) -> str | None:
    """
    Text content for display or submission.

    Returns:
        Decoded text for text files, a placeholder marker for PDFs, and None
        for images and other binaries.

    Raises:
        ReadError: If a text file is not valid UTF-8.
    """
    kind = classify(file)
    if kind is ContentKind.TEXT:
        try:
            return file.content.decode("utf-8-sig")
        except UnicodeDecodeError as e:
            raise ReadError(f"Failed to read file content: {file.name}") from e
    if kind is ContentKind.PDF:
        return pdf_placeholder(file)
    return None


def image_preview(file: UploadedFile) -> str:
    """data: URL suitable for displaying an image upload."""
    encoded = base64.b64encode(file.content).decode("ascii")
    return f"data:{file.mime_type};base64,{encoded}"


def prepare_upload(file: UploadedFile, max_bytes: int = MAX_UPLOAD_BYTES) -> PreparedUpload:
    """
    Validate and normalize an upload for translation.

    Text files become text; everything else, including text files that cannot
    be decoded, becomes a base64 payload.

    Raises:
        SizeLimitExceeded: Before any processing if the file is too large.
    """
    check_size(file, max_bytes)
    kind = classify(file)
    mime_type = file.mime_type or DEFAULT_MIME_TYPE

    if kind is ContentKind.TEXT:
        try:
            text = extract_text(file)
            logger.info(f"Loaded text file {file.name} ({len(text)} chars)")
            return PreparedUpload(name=file.name, kind=kind, mime_type=mime_type, text=text)
        except ReadError as e:
            logger.warning(f"{e}; sending as binary")
            kind = ContentKind.BINARY

    payload = base64.b64encode(file.content).decode("ascii")
    preview = image_preview(file) if kind is ContentKind.IMAGE else None
    text = pdf_placeholder(file) if kind is ContentKind.PDF else None
    logger.info(f"Loaded {kind.value} file {file.name} ({file.size} bytes)")
    return PreparedUpload(
        name=file.name,
        kind=kind,
        mime_type=mime_type,
        text=text,
        payload=payload,
        preview=preview,
    )
