"""
Document Composition Module
===========================
Builds the full Clash configuration document from engine output.
"""

from .document import (
    DEFAULT_GROUP_NAME,
    ENTRY_INDENT,
    GROUP_MEMBER_INDENT,
    DocumentComposer,
    placeholder_document,
)

__all__ = [
    "DEFAULT_GROUP_NAME",
    "ENTRY_INDENT",
    "GROUP_MEMBER_INDENT",
    "DocumentComposer",
    "placeholder_document",
]
