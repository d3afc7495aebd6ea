"""
Presigned URL utilities.

Filename validation for policy document uploads.

Dependencies: hr_rag.core.exceptions
System role: Presigned URL request validation
"""

from hr_rag.core.document_processing.tasks.parsing_task import (
    DOC_MIME_TYPE,
    DOCX_MIME_TYPE,
    PDF_MIME_TYPE,
    TEXT_MIME_TYPE,
)
from hr_rag.core.exceptions import ValidationError

# Extensions accepted for each supported MIME type
ALLOWED_EXTENSIONS = {
    PDF_MIME_TYPE: {"pdf"},
    DOCX_MIME_TYPE: {"docx"},
    DOC_MIME_TYPE: {"doc"},
    TEXT_MIME_TYPE: {"txt", "md"},
}


def validate_filename(filename: str, content_type: str) -> None:
    """
    Validate filename for security and consistency with its MIME type.

    Args:
        filename: Original filename from user
        content_type: Declared MIME type

    Raises:
        ValidationError: If filename is invalid or does not match the MIME type
    """
    if not filename or len(filename) > 255:
        raise ValidationError("Invalid filename length", field="filename")

    # Block path traversal
    if ".." in filename or "/" in filename or "\\" in filename:
        raise ValidationError("Invalid filename: path traversal detected", field="filename")

    if "." not in filename:
        raise ValidationError("Filename must have an extension", field="filename")

    extension = filename.rsplit(".", 1)[-1].lower()
    allowed = ALLOWED_EXTENSIONS.get(content_type)
    if allowed is not None and extension not in allowed:
        raise ValidationError(
            f"Extension .{extension} does not match content type {content_type}",
            field="filename",
        )
