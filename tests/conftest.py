"""
doctree test suite: shared fixtures.

Run:  pytest tests/ -v
"""

import pytest
import pytest_asyncio

from doctree.core.db import create_engine, create_session_factory, init_models
from doctree.db.repositories import (
    DocumentNodeRepository,
    DocumentRepository,
    InMemoryDocumentNodeRepository,
    InMemoryDocumentRepository,
)
from doctree.domains.entities.ids import UserID
from doctree.domains.tree.entities import DocumentNode
from doctree.domains.tree.services import DocumentTreeService


@pytest.fixture
def user_id():
    return UserID.new()


@pytest.fixture
def document_repository():
    return InMemoryDocumentRepository()


@pytest.fixture
def node_repository():
    return InMemoryDocumentNodeRepository()


@pytest.fixture
def service(document_repository, node_repository):
    return DocumentTreeService(document_repository, node_repository)


@pytest.fixture
def tree(user_id):
    """
    Root
    ├── A
    │   └── B
    └── C
    """
    root = DocumentNode.folder("Root", user_id)
    a = DocumentNode.folder("A", user_id, parent=root)
    b = DocumentNode.folder("B", user_id, parent=a)
    c = DocumentNode.folder("C", user_id, parent=root, order=1)
    return {"root": root, "a": a, "b": b, "c": c}


@pytest_asyncio.fixture
async def session(tmp_path):
    """Сессия SQLAlchemy поверх временной базы SQLite."""
    engine = create_engine(f"sqlite+aiosqlite:///{tmp_path / 'doctree.db'}")
    await init_models(engine)
    factory = create_session_factory(engine)
    async with factory() as session:
        yield session
    await engine.dispose()


@pytest.fixture
def sql_document_repository(session):
    return DocumentRepository(session)


@pytest.fixture
def sql_node_repository(session):
    return DocumentNodeRepository(session)
