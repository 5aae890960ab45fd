from datetime import datetime
from enum import Enum
from typing import Optional

from doctree.domains.entities.ids import DocumentID, UserID
from doctree.domains.entities.timestamps import advance, utcnow
from doctree.domains.errors import InvalidOperationError, require_text


class DocumentStatus(str, Enum):
    """Статус жизненного цикла документа"""
    DRAFT = "draft"
    PUBLISHED = "published"
    ARCHIVED = "archived"


class Document:
    """Сущность документа: содержимое живет отдельно от места в дереве"""

    def __init__(
        self,
        id: DocumentID,
        title: str,
        content: str,
        created_by: UserID,
        description: Optional[str] = None,
        status: DocumentStatus = DocumentStatus.DRAFT,
        created_at: Optional[datetime] = None,
        last_modified_at: Optional[datetime] = None
    ):
        self.id = id
        self.title = require_text(title, "title")
        self.content = require_text(content, "content", allow_blank=True)
        self.created_by = created_by
        self.description = description
        self.status = status
        self.created_at = created_at or utcnow()
        self.last_modified_at = last_modified_at or self.created_at

    @classmethod
    def create(
        cls,
        title: str,
        content: str,
        created_by: UserID,
        description: Optional[str] = None
    ) -> "Document":
        """Создание нового документа в статусе черновика"""
        return cls(
            id=DocumentID.new(),
            title=title,
            content=content,
            created_by=created_by,
            description=description
        )

    @property
    def is_draft(self) -> bool:
        return self.status == DocumentStatus.DRAFT

    @property
    def is_published(self) -> bool:
        return self.status == DocumentStatus.PUBLISHED

    @property
    def is_archived(self) -> bool:
        return self.status == DocumentStatus.ARCHIVED

    def update_content(self, title: str, content: str, description: Optional[str] = None) -> None:
        """Обновление заголовка, содержимого и описания"""
        # Проверяем оба значения до изменения состояния
        title = require_text(title, "title")
        content = require_text(content, "content", allow_blank=True)
        self.title = title
        self.content = content
        self.description = description
        self._touch()

    def publish(self) -> None:
        """Публикация документа"""
        if self.is_archived:
            raise InvalidOperationError("Archived documents cannot be published.")
        self.status = DocumentStatus.PUBLISHED
        self._touch()

    def archive(self) -> None:
        """Архивация документа из любого статуса"""
        self.status = DocumentStatus.ARCHIVED
        self._touch()

    def _touch(self) -> None:
        self.last_modified_at = advance(self.last_modified_at)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Document):
            return False
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __repr__(self) -> str:
        return f"Document(id={self.id}, title={self.title}, status={self.status.value})"
