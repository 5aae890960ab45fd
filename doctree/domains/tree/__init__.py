from doctree.domains.tree.entities import DocumentNode, DocumentNodeType
from doctree.domains.tree.gateways import DocumentGateway, DocumentNodeGateway
from doctree.domains.tree.schemas import DocumentNodeRead
from doctree.domains.tree.services import DocumentTreeService, DocumentNodeWithDocument

__all__ = [
    "DocumentNode", "DocumentNodeType",
    "DocumentGateway", "DocumentNodeGateway",
    "DocumentNodeRead",
    "DocumentTreeService", "DocumentNodeWithDocument"
]
