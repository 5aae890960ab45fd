from datetime import datetime
from enum import Enum
from typing import Iterator, List, Optional, Tuple

from doctree.domains.entities.ids import DocumentID, DocumentNodeID, UserID
from doctree.domains.entities.timestamps import advance, utcnow
from doctree.domains.errors import (
    CycleDetectedError,
    InvalidArgumentError,
    InvalidOperationError,
    require_text,
)


class DocumentNodeType(str, Enum):
    """Тип узла дерева"""
    FOLDER = "folder"
    DOCUMENT = "document"


class DocumentNode:
    """
    Узел дерева документов, корень агрегата для управления структурой.

    Узел-папка может содержать дочерние узлы, узел-документ ссылается на
    агрегат Document только по идентификатору. Связь parent/children
    меняется исключительно через _attach/_detach, поэтому обе стороны
    всегда согласованы.
    """

    def __init__(
        self,
        name: str,
        created_by: UserID,
        document_id: Optional[DocumentID] = None,
        node_type: Optional[DocumentNodeType] = None,
        parent: Optional["DocumentNode"] = None,
        order: int = 0,
        id: Optional[DocumentNodeID] = None,
        created_at: Optional[datetime] = None,
        last_modified_at: Optional[datetime] = None
    ):
        if node_type is None:
            node_type = DocumentNodeType.FOLDER if document_id is None else DocumentNodeType.DOCUMENT
        if node_type == DocumentNodeType.DOCUMENT and document_id is None:
            raise InvalidArgumentError("document_id is required for document nodes")
        if node_type == DocumentNodeType.FOLDER and document_id is not None:
            raise InvalidOperationError("Folder nodes cannot reference a document.")
        if parent is not None:
            parent._ensure_can_own_children()

        self.id = id or DocumentNodeID.new()
        self.name = require_text(name, "name")
        self.type = node_type
        self.document_id = document_id
        self.created_by = created_by
        self.created_at = created_at or utcnow()
        self.last_modified_at = last_modified_at or self.created_at
        self.order = order
        self.parent: Optional["DocumentNode"] = None
        self.parent_id: Optional[DocumentNodeID] = None
        self._children: List["DocumentNode"] = []

        if parent is not None:
            self._attach(parent)

    @classmethod
    def folder(
        cls,
        name: str,
        created_by: UserID,
        parent: Optional["DocumentNode"] = None,
        order: int = 0
    ) -> "DocumentNode":
        """Создание узла-папки"""
        return cls(name, created_by, node_type=DocumentNodeType.FOLDER, parent=parent, order=order)

    @classmethod
    def document(
        cls,
        name: str,
        document_id: DocumentID,
        created_by: UserID,
        parent: Optional["DocumentNode"] = None,
        order: int = 0
    ) -> "DocumentNode":
        """Создание узла, ссылающегося на существующий документ"""
        return cls(
            name,
            created_by,
            document_id=document_id,
            node_type=DocumentNodeType.DOCUMENT,
            parent=parent,
            order=order
        )

    @property
    def children(self) -> Tuple["DocumentNode", ...]:
        return tuple(self._children)

    @property
    def ordered_children(self) -> List["DocumentNode"]:
        """Дочерние узлы в порядке отображения (при равном order - в порядке добавления)"""
        return sorted(self._children, key=lambda child: child.order)

    @property
    def is_folder(self) -> bool:
        return self.type == DocumentNodeType.FOLDER

    @property
    def is_document(self) -> bool:
        return self.type == DocumentNodeType.DOCUMENT

    @property
    def is_root(self) -> bool:
        return self.parent is None

    @property
    def level(self) -> int:
        return sum(1 for _ in self.get_ancestors())

    @property
    def root(self) -> "DocumentNode":
        node = self
        while node.parent is not None:
            node = node.parent
        return node

    def rename(self, new_name: str) -> None:
        self.name = require_text(new_name, "name")
        self._touch()

    def change_document(self, new_document_id: DocumentID) -> None:
        """Привязка узла к другому документу (только для узлов-документов)"""
        if not self.is_document:
            raise InvalidOperationError("Can only change document for document nodes.")
        if new_document_id is None:
            raise InvalidArgumentError("document_id is required for document nodes")

        self.document_id = new_document_id
        self._touch()

    def move(self, new_parent: Optional["DocumentNode"] = None, new_order: int = 0) -> None:
        """Перенос узла вместе с поддеревом под new_parent (или в корень)"""
        if new_parent is not None:
            if self.would_create_cycle(new_parent):
                raise CycleDetectedError("Moving this node would create a cycle in the tree.")
            new_parent._ensure_can_own_children()

        self._detach()
        if new_parent is not None:
            self._attach(new_parent)
        self.order = new_order
        self._touch()

    def reorder(self, new_order: int) -> None:
        self.order = new_order
        self._touch()

    def add_child(self, child: "DocumentNode") -> None:
        """Добавление дочернего узла; повторное добавление ничего не меняет"""
        self._ensure_can_own_children()
        if child.would_create_cycle(self):
            raise CycleDetectedError("Adding this child would create a cycle in the tree.")

        if child.parent is self:
            return

        child._detach()
        child._attach(self)
        child._touch()

    def remove_child(self, child: "DocumentNode") -> None:
        if child.parent is not self:
            return

        child._detach()
        child._touch()

    def delete(self) -> None:
        """
        Удаление узла и всех потомков.

        Документы, на которые ссылаются узлы, не удаляются - это отдельное
        решение DocumentTreeService.
        """
        self._detach()

        for child in list(self._children):
            child.delete()

        self._children.clear()

    def get_all_descendants(self) -> Iterator["DocumentNode"]:
        """
        Обход поддерева в глубину (pre-order), без самого узла.

        Снимок поддерева делается в момент начала итерации, изменения
        структуры во время обхода на результат не влияют.
        """
        snapshot = []
        stack = list(reversed(self._children))
        while stack:
            node = stack.pop()
            snapshot.append(node)
            stack.extend(reversed(node._children))

        yield from snapshot

    def get_ancestors(self) -> Iterator["DocumentNode"]:
        current = self.parent
        while current is not None:
            yield current
            current = current.parent

    def get_path(self) -> str:
        names = [ancestor.name for ancestor in self.get_ancestors()]
        names.reverse()
        names.append(self.name)
        return "/".join(names)

    def get_all_document_ids(self) -> List[DocumentID]:
        """Идентификаторы документов всего поддерева, включая сам узел"""
        nodes = [self, *self.get_all_descendants()]
        ids = (node.document_id for node in nodes if node.is_document)
        return list(dict.fromkeys(ids))

    def would_create_cycle(self, candidate: "DocumentNode") -> bool:
        """True, если candidate - сам узел или один из его потомков"""
        if candidate is self:
            return True
        return any(ancestor is self for ancestor in candidate.get_ancestors())

    def _ensure_can_own_children(self) -> None:
        if not self.is_folder:
            raise InvalidOperationError("Only folder nodes can have children.")

    def _attach(self, parent: "DocumentNode") -> None:
        self.parent = parent
        self.parent_id = parent.id
        if not any(existing is self for existing in parent._children):
            parent._children.append(self)

    def _detach(self) -> None:
        if self.parent is not None:
            self.parent._children = [child for child in self.parent._children if child is not self]
        self.parent = None
        self.parent_id = None

    def _touch(self) -> None:
        self.last_modified_at = advance(self.last_modified_at)

    def __eq__(self, other) -> bool:
        if not isinstance(other, DocumentNode):
            return False
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __repr__(self) -> str:
        return f"DocumentNode(id={self.id}, name={self.name}, type={self.type.value})"
