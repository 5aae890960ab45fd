from doctree.db.models.document import Document
from doctree.db.models.node import DocumentNode

__all__ = [
    "Document",
    "DocumentNode"
]
