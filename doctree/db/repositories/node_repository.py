import logging
from typing import Dict, List, Optional, Set
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
import uuid

from doctree.db.models.node import DocumentNode as DocumentNodeModel
from doctree.domains.entities.ids import DocumentID, DocumentNodeID, UserID
from doctree.domains.entities.timestamps import ensure_utc
from doctree.domains.tree.entities import DocumentNode

logger = logging.getLogger(__name__)


class DocumentNodeRepository:
    """
    Репозиторий для работы с узлами дерева документов.

    Узел хранится строкой с parent_id. При чтении восстанавливается все
    дерево, которому принадлежит узел, чтобы parent и children были живыми
    ссылками, а не только идентификаторами.
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get(self, node_id: DocumentNodeID) -> Optional[DocumentNode]:
        """Получение узла по идентификатору вместе с его деревом"""
        db_node = await self.session.get(DocumentNodeModel, node_id.value)
        if db_node is None:
            return None

        while db_node.parent_id is not None:
            db_parent = await self.session.get(DocumentNodeModel, db_node.parent_id)
            if db_parent is None:
                logger.warning(f"Node {db_node.id} references missing parent {db_node.parent_id}")
                return None
            db_node = db_parent

        nodes = await self._load_tree(db_node)
        return nodes[node_id.value]

    async def get_roots(self, user_id: UserID) -> Set[DocumentNode]:
        """Корневые узлы пользователя с загруженными поддеревьями"""
        result = await self.session.execute(
            select(DocumentNodeModel)
            .where(DocumentNodeModel.parent_id.is_(None), DocumentNodeModel.created_by == user_id.value)
            .order_by(DocumentNodeModel.order, DocumentNodeModel.created_at)
        )

        roots = set()
        for db_root in result.scalars().all():
            nodes = await self._load_tree(db_root)
            roots.add(nodes[db_root.id])
        return roots

    async def add(self, node: DocumentNode) -> None:
        """Добавление или обновление узла вместе с поддеревом"""
        for current in [node, *node.get_all_descendants()]:
            await self.session.merge(self._to_model(current))
        await self.session.flush()
        logger.debug(f"Staged node {node.id} at '{node.get_path()}'")

    async def remove(self, node: DocumentNode) -> None:
        """Удаление узла вместе с сохраненным поддеревом"""
        db_node = await self.session.get(DocumentNodeModel, node.id.value)
        if db_node is None:
            return

        levels = [[db_node]]
        while levels[-1]:
            result = await self.session.execute(
                select(DocumentNodeModel)
                .where(DocumentNodeModel.parent_id.in_([row.id for row in levels[-1]]))
            )
            levels.append(result.scalars().all())

        # Потомки удаляются раньше родителей
        for level in reversed(levels):
            for db_row in level:
                await self.session.delete(db_row)
            await self.session.flush()

        removed = sum(len(level) for level in levels)
        logger.debug(f"Staged removal of node {node.id} and {removed - 1} descendants")

    async def commit(self) -> None:
        await self.session.commit()

    async def rollback(self) -> None:
        await self.session.rollback()

    async def _load_tree(self, db_root: DocumentNodeModel) -> Dict[uuid.UUID, DocumentNode]:
        """Восстановление дерева от корня по уровням"""
        root = self._to_domain(db_root, None)
        nodes = {db_root.id: root}
        frontier: List[uuid.UUID] = [db_root.id]

        while frontier:
            result = await self.session.execute(
                select(DocumentNodeModel)
                .where(DocumentNodeModel.parent_id.in_(frontier))
                .order_by(DocumentNodeModel.order, DocumentNodeModel.created_at)
            )
            frontier = []
            for db_node in result.scalars().all():
                nodes[db_node.id] = self._to_domain(db_node, nodes[db_node.parent_id])
                frontier.append(db_node.id)

        return nodes

    def _to_model(self, node: DocumentNode) -> DocumentNodeModel:
        return DocumentNodeModel(
            id=node.id.value,
            name=node.name,
            type=node.type,
            parent_id=node.parent_id.value if node.parent_id else None,
            document_id=node.document_id.value if node.document_id else None,
            created_by=node.created_by.value,
            created_at=node.created_at,
            last_modified_at=node.last_modified_at,
            order=node.order
        )

    def _to_domain(self, db_node: DocumentNodeModel, parent: Optional[DocumentNode]) -> DocumentNode:
        """Преобразование модели БД в доменную сущность"""
        return DocumentNode(
            id=DocumentNodeID(db_node.id),
            name=db_node.name,
            node_type=db_node.type,
            document_id=DocumentID(db_node.document_id) if db_node.document_id else None,
            created_by=UserID(db_node.created_by),
            parent=parent,
            order=db_node.order,
            created_at=ensure_utc(db_node.created_at),
            last_modified_at=ensure_utc(db_node.last_modified_at)
        )
