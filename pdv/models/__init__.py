from .validation import DocumentResult, DocumentType, FieldKind, FieldResult
from .sequence import SequenceKind, SequentialConfig

__all__ = [
    "DocumentResult",
    "DocumentType",
    "FieldKind",
    "FieldResult",
    "SequenceKind",
    "SequentialConfig",
]
