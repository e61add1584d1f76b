"""Core module pour email_builder."""
from .schemas import (
    DocumentError,
    GlobalStyles,
    EmailMetadata,
    EmailDocument,
    load_document,
)
from .styles import (
    SIZE_MAPPINGS,
    CssPropertyMap,
    to_css,
    css_declarations,
    default_alignment,
    size_option_for,
)
from .validation import ValidationIssue, ValidationResult, validate_document

__all__ = [
    "DocumentError",
    "GlobalStyles",
    "EmailMetadata",
    "EmailDocument",
    "load_document",
    "SIZE_MAPPINGS",
    "CssPropertyMap",
    "to_css",
    "css_declarations",
    "default_alignment",
    "size_option_for",
    "ValidationIssue",
    "ValidationResult",
    "validate_document",
]
