from sqlalchemy import Column, String, Integer, DateTime, Enum, ForeignKey, Uuid

from doctree.core.db import Base
from doctree.domains.tree.entities import DocumentNodeType


class DocumentNode(Base):
    __tablename__ = "document_nodes"

    id = Column(Uuid(as_uuid=True), primary_key=True)
    name = Column(String(255), nullable=False)
    type = Column(Enum(DocumentNodeType, native_enum=False, length=20), nullable=False)
    parent_id = Column(Uuid(as_uuid=True), ForeignKey("document_nodes.id", ondelete="CASCADE"), index=True, nullable=True)
    # Ссылка на агрегат Document только по идентификатору
    document_id = Column(Uuid(as_uuid=True), index=True, nullable=True)
    created_by = Column(Uuid(as_uuid=True), index=True, nullable=False)
    created_at = Column(DateTime(timezone=True), nullable=False)
    last_modified_at = Column(DateTime(timezone=True), nullable=False)
    order = Column("sort_order", Integer, nullable=False, default=0)
