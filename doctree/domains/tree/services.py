import logging
from dataclasses import dataclass
from typing import List, Optional, Set
from sqlalchemy.ext.asyncio import AsyncSession

from doctree.core.config import settings
from doctree.domains.documents.entities import Document
from doctree.domains.entities.ids import UserID
from doctree.domains.tree.entities import DocumentNode
from doctree.domains.tree.gateways import DocumentGateway, DocumentNodeGateway
from doctree.domains.tree.schemas import DocumentNodeRead

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DocumentNodeWithDocument:
    """Узел-документ вместе с документом, на который он ссылается"""
    node: DocumentNode
    document: Document


class DocumentTreeService:
    """
    Сервис, согласующий агрегаты DocumentNode и Document.

    Два шлюза хранения вызываются независимо, общей транзакции нет. Если
    узел не удалось создать после сохранения документа, документ остается
    в хранилище; при compensate_on_failure=True сервис удаляет его перед
    повторным выбросом исключения.
    """

    def __init__(
        self,
        document_repository: DocumentGateway,
        node_repository: DocumentNodeGateway,
        compensate_on_failure: bool = False
    ):
        if document_repository is None:
            raise ValueError("document_repository is required")
        if node_repository is None:
            raise ValueError("node_repository is required")

        self.document_repository = document_repository
        self.node_repository = node_repository
        self.compensate_on_failure = compensate_on_failure

    @classmethod
    def for_session(cls, session: AsyncSession) -> "DocumentTreeService":
        """Сервис поверх репозиториев SQLAlchemy с настройками из окружения"""
        from doctree.db.repositories import DocumentRepository, DocumentNodeRepository

        return cls(
            DocumentRepository(session),
            DocumentNodeRepository(session),
            compensate_on_failure=settings.compensate_orphaned_documents
        )

    async def create_document_with_node(
        self,
        node_name: str,
        title: str,
        content: str,
        created_by: UserID,
        parent: Optional[DocumentNode] = None,
        description: Optional[str] = None,
        order: int = 0
    ) -> DocumentNode:
        """Создание документа и ссылающегося на него узла дерева"""
        document = Document.create(title, content, created_by, description)
        await self.document_repository.add(document)
        await self.document_repository.commit()

        node = None
        try:
            node = DocumentNode.document(node_name, document.id, created_by, parent, order)
            await self.node_repository.add(node)
            await self.node_repository.commit()
        except Exception:
            # Сессия после неудачного flush непригодна, пока ее не откатить
            await self.node_repository.rollback()
            if not self.compensate_on_failure:
                logger.error(f"Node creation failed, document {document.id} left without a node")
                raise

            logger.warning(f"Node creation failed, removing orphaned document {document.id}")
            if node is not None:
                node.delete()
            try:
                await self.document_repository.remove(document)
                await self.document_repository.commit()
            except Exception:
                logger.exception(f"Failed to remove orphaned document {document.id}")
            raise

        logger.info(f"Created document {document.id} with node {node.id} at '{node.get_path()}'")
        return node

    async def delete_document_node(self, node: DocumentNode, delete_referenced_document: bool = False) -> None:
        """Удаление узла с поддеревом и, по запросу, документов, на которые оно ссылается"""
        # Собираем все до изменения структуры
        document_ids = node.get_all_document_ids()
        descendants = len(list(node.get_all_descendants()))

        node.delete()
        await self.node_repository.remove(node)
        await self.node_repository.commit()

        logger.info(f"Deleted node {node.id} with {descendants} descendants")

        if not delete_referenced_document:
            return

        deleted = 0
        for document_id in document_ids:
            document = await self.document_repository.get(document_id)
            if document is None:
                continue
            await self.document_repository.remove(document)
            deleted += 1
        await self.document_repository.commit()

        logger.info(f"Deleted {deleted} of {len(document_ids)} documents referenced by node {node.id}")

    async def get_document_nodes_with_content(self, parent_node: DocumentNode) -> List[DocumentNodeWithDocument]:
        """Узлы-документы поддерева вместе с данными документов"""
        result = []
        for node in parent_node.get_all_descendants():
            if not node.is_document:
                continue

            document = await self.document_repository.get(node.document_id)
            if document is None:
                logger.debug(f"Node {node.id} references missing document {node.document_id}")
                continue
            result.append(DocumentNodeWithDocument(node, document))

        return result

    async def get_roots(self, user_id: UserID) -> Set[DocumentNode]:
        """Корневые узлы пользователя"""
        return await self.node_repository.get_roots(user_id)

    def build_tree(self, node: DocumentNode) -> DocumentNodeRead:
        """Снимок поддерева для внешнего слоя"""
        return DocumentNodeRead.from_node(node)
