import logging
from typing import Dict, List, Optional, Set, Tuple

from doctree.domains.documents.entities import Document
from doctree.domains.entities.ids import DocumentID, DocumentNodeID, UserID
from doctree.domains.tree.entities import DocumentNode

logger = logging.getLogger(__name__)


class _InMemoryRepository:
    """Словарь сущностей; изменения применяются при commit"""

    def __init__(self):
        self._items: Dict = {}
        self._pending: List[Tuple[str, object]] = []
        self.commits = 0

    def _stage(self, action: str, entity) -> None:
        self._pending.append((action, entity))

    def _apply(self, action: str, entity) -> None:
        if action == "add":
            self._items[entity.id] = entity
        else:
            self._items.pop(entity.id, None)

    async def commit(self) -> None:
        for action, entity in self._pending:
            self._apply(action, entity)
        self._pending.clear()
        self.commits += 1

    async def rollback(self) -> None:
        """Отмена неподтвержденных изменений"""
        self._pending.clear()

    def __len__(self) -> int:
        return len(self._items)


class InMemoryDocumentRepository(_InMemoryRepository):
    """Хранилище документов в памяти"""

    async def get(self, document_id: DocumentID) -> Optional[Document]:
        return self._items.get(document_id)

    async def add(self, document: Document) -> None:
        self._stage("add", document)

    async def remove(self, document: Document) -> None:
        self._stage("remove", document)


class InMemoryDocumentNodeRepository(_InMemoryRepository):
    """
    Хранилище узлов в памяти; хранит живые объекты узлов.

    Как и строка в БД, для каждого узла запоминается parent_id на момент
    commit. По этим связям remove удаляет все сохраненное поддерево, даже
    если delete() уже отцепил потомков в памяти.
    """

    def __init__(self):
        super().__init__()
        self._parents: Dict[DocumentNodeID, Optional[DocumentNodeID]] = {}

    async def get(self, node_id: DocumentNodeID) -> Optional[DocumentNode]:
        return self._items.get(node_id)

    async def get_roots(self, user_id: UserID) -> Set[DocumentNode]:
        return {
            node for node in self._items.values()
            if node.is_root and node.created_by == user_id
        }

    async def add(self, node: DocumentNode) -> None:
        for current in [node, *node.get_all_descendants()]:
            self._stage("add", current)

    async def remove(self, node: DocumentNode) -> None:
        self._stage("remove", node)

    def _apply(self, action: str, node) -> None:
        if action == "add":
            self._items[node.id] = node
            self._parents[node.id] = node.parent_id
            return

        removed = self._stored_subtree(node.id)
        for node_id in removed:
            self._items.pop(node_id, None)
            self._parents.pop(node_id, None)
        logger.debug(f"Removed node {node.id} and {len(removed) - 1} descendants")

    def _stored_subtree(self, root_id: DocumentNodeID) -> List[DocumentNodeID]:
        if root_id not in self._parents:
            return [root_id]

        subtree = [root_id]
        frontier = {root_id}
        while frontier:
            frontier = {node_id for node_id, parent_id in self._parents.items() if parent_id in frontier}
            subtree.extend(frontier)
        return subtree
