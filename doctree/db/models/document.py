from sqlalchemy import Column, String, Text, DateTime, Enum, Uuid

from doctree.core.db import Base
from doctree.domains.documents.entities import DocumentStatus


class Document(Base):
    __tablename__ = "documents"

    id = Column(Uuid(as_uuid=True), primary_key=True)
    title = Column(String(255), nullable=False)
    content = Column(Text, nullable=False)
    description = Column(Text, nullable=True)
    # Пользователи живут во внешней системе, поэтому без внешнего ключа
    created_by = Column(Uuid(as_uuid=True), index=True, nullable=False)
    status = Column(Enum(DocumentStatus, native_enum=False, length=20), nullable=False, default=DocumentStatus.DRAFT)
    created_at = Column(DateTime(timezone=True), nullable=False)
    last_modified_at = Column(DateTime(timezone=True), nullable=False)
