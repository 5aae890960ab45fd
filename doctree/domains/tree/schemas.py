from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import List, Optional
import uuid
from datetime import datetime

from doctree.domains.documents.schemas import unwrap_id
from doctree.domains.tree.entities import DocumentNodeType


class DocumentNodeRead(BaseModel):
    """Снимок узла дерева вместе с поддеревом"""
    id: uuid.UUID
    name: str
    type: DocumentNodeType
    parent_id: Optional[uuid.UUID] = None
    document_id: Optional[uuid.UUID] = None
    created_by: uuid.UUID
    created_at: datetime
    last_modified_at: datetime
    order: int
    path: str
    level: int
    children: List["DocumentNodeRead"] = Field(default_factory=list)

    model_config = ConfigDict(from_attributes=True)

    @field_validator("id", "parent_id", "document_id", "created_by", mode="before")
    @classmethod
    def validate_ids(cls, v):
        return unwrap_id(v)

    @classmethod
    def from_node(cls, node) -> "DocumentNodeRead":
        """Построение снимка поддерева; дочерние узлы в порядке отображения"""
        return cls(
            id=node.id,
            name=node.name,
            type=node.type,
            parent_id=node.parent_id,
            document_id=node.document_id,
            created_by=node.created_by,
            created_at=node.created_at,
            last_modified_at=node.last_modified_at,
            order=node.order,
            path=node.get_path(),
            level=node.level,
            children=[cls.from_node(child) for child in node.ordered_children]
        )
