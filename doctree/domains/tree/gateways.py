from typing import Optional, Protocol, Set

from doctree.domains.documents.entities import Document
from doctree.domains.entities.ids import DocumentID, DocumentNodeID, UserID
from doctree.domains.tree.entities import DocumentNode


class DocumentGateway(Protocol):
    """Контракт хранилища агрегата Document"""

    async def get(self, document_id: DocumentID) -> Optional[Document]: ...

    async def add(self, document: Document) -> None: ...

    async def remove(self, document: Document) -> None: ...

    async def commit(self) -> None: ...

    async def rollback(self) -> None: ...


class DocumentNodeGateway(Protocol):
    """Контракт хранилища агрегата DocumentNode"""

    async def get(self, node_id: DocumentNodeID) -> Optional[DocumentNode]: ...

    async def get_roots(self, user_id: UserID) -> Set[DocumentNode]: ...

    async def add(self, node: DocumentNode) -> None: ...

    async def remove(self, node: DocumentNode) -> None: ...

    async def commit(self) -> None: ...

    async def rollback(self) -> None: ...
