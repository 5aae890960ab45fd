from doctree.domains.entities.ids import EntityID, UserID, DocumentID, DocumentNodeID

__all__ = ["EntityID", "UserID", "DocumentID", "DocumentNodeID"]
