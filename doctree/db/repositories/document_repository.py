import logging
from typing import Optional, TYPE_CHECKING
from sqlalchemy.ext.asyncio import AsyncSession

from doctree.db.models.document import Document as DocumentModel
from doctree.domains.entities.ids import DocumentID, UserID
from doctree.domains.entities.timestamps import ensure_utc

if TYPE_CHECKING:
    from doctree.domains.documents.entities import Document

logger = logging.getLogger(__name__)


class DocumentRepository:
    """Репозиторий для работы с документами"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get(self, document_id: DocumentID) -> Optional["Document"]:
        """Получение документа по идентификатору"""
        db_document = await self.session.get(DocumentModel, document_id.value)
        return self._to_domain(db_document) if db_document else None

    async def add(self, document: "Document") -> None:
        """Добавление или обновление документа"""
        await self.session.merge(self._to_model(document))
        logger.debug(f"Staged document {document.id}")

    async def remove(self, document: "Document") -> None:
        """Удаление документа"""
        db_document = await self.session.get(DocumentModel, document.id.value)
        if db_document is None:
            return

        if db_document in self.session.new:
            self.session.expunge(db_document)
        else:
            await self.session.delete(db_document)
        logger.debug(f"Staged removal of document {document.id}")

    async def commit(self) -> None:
        await self.session.commit()

    async def rollback(self) -> None:
        await self.session.rollback()

    def _to_model(self, document: "Document") -> DocumentModel:
        return DocumentModel(
            id=document.id.value,
            title=document.title,
            content=document.content,
            description=document.description,
            created_by=document.created_by.value,
            status=document.status,
            created_at=document.created_at,
            last_modified_at=document.last_modified_at
        )

    def _to_domain(self, db_document: DocumentModel) -> "Document":
        """Преобразование модели БД в доменную сущность"""
        from doctree.domains.documents.entities import Document

        return Document(
            id=DocumentID(db_document.id),
            title=db_document.title,
            content=db_document.content,
            created_by=UserID(db_document.created_by),
            description=db_document.description,
            status=db_document.status,
            created_at=ensure_utc(db_document.created_at),
            last_modified_at=ensure_utc(db_document.last_modified_at)
        )
