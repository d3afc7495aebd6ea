"""
Router utility functions.

Contains helper functions extracted from router endpoints to keep them clean.
"""

from hr_rag.api.routers.router_utils.document_utils import (
    process_document_background,
    run_claimed_document_background,
)
from hr_rag.api.routers.router_utils.errors import to_http_exception
from hr_rag.api.routers.router_utils.presigned_url_utils import validate_filename

__all__ = [
    "process_document_background",
    "run_claimed_document_background",
    "to_http_exception",
    "validate_filename",
]
