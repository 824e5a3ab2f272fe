"""Services"""

from nocodefolio.services.editing import (
    AppendEntry,
    ContactUpdate,
    DeleteEntry,
    EntryUpdate,
    FieldUpdate,
    RecordUpdate,
    apply_update,
)
from nocodefolio.services.normalizer import normalize_record

__all__ = [
    "AppendEntry",
    "ContactUpdate",
    "DeleteEntry",
    "EntryUpdate",
    "FieldUpdate",
    "RecordUpdate",
    "apply_update",
    "normalize_record",
]
