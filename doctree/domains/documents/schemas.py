from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator
from typing import Optional
import uuid
from datetime import datetime

from doctree.domains.documents.entities import DocumentStatus
from doctree.domains.entities.ids import EntityID


def unwrap_id(value):
    """Типизированный идентификатор -> uuid.UUID"""
    return value.value if isinstance(value, EntityID) else value


class DocumentRead(BaseModel):
    """Схема для чтения данных документа"""
    id: uuid.UUID
    title: str = Field(..., min_length=1)
    content: str
    description: Optional[str] = None
    created_by: uuid.UUID
    status: DocumentStatus
    created_at: datetime
    last_modified_at: datetime

    model_config = ConfigDict(from_attributes=True)

    @field_validator("id", "created_by", mode="before")
    @classmethod
    def validate_ids(cls, v):
        return unwrap_id(v)

    @field_serializer("status")
    def serialize_status(self, status: DocumentStatus) -> str:
        return status.value
