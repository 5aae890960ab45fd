from doctree.db.repositories.document_repository import DocumentRepository
from doctree.db.repositories.node_repository import DocumentNodeRepository
from doctree.db.repositories.memory import InMemoryDocumentRepository, InMemoryDocumentNodeRepository

__all__ = [
    "DocumentRepository",
    "DocumentNodeRepository",
    "InMemoryDocumentRepository",
    "InMemoryDocumentNodeRepository"
]
