"""Binary/text ingestion of uploaded artifacts."""

from .files import (
    TEXT_EXTENSIONS,
    ContentKind,
    PreparedUpload,
    UploadedFile,
    check_size,
    classify,
    extract_text,
    guess_mime_type,
    image_preview,
    prepare_upload,
)

__all__ = [
    "TEXT_EXTENSIONS",
    "ContentKind",
    "PreparedUpload",
    "UploadedFile",
    "check_size",
    "classify",
    "extract_text",
    "guess_mime_type",
    "image_preview",
    "prepare_upload",
]
