from doctree.domains.documents.entities import Document, DocumentStatus
from doctree.domains.documents.schemas import DocumentRead

__all__ = [
    "Document", "DocumentStatus",
    "DocumentRead"
]
