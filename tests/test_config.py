"""Tests for doctree.core: settings and logging setup."""

import logging

from doctree.core.config import Settings
from doctree.core.logging import configure_logging
from doctree.domains.tree.services import DocumentTreeService


class TestSettings:

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("DOCTREE_DATABASE_URL", raising=False)
        monkeypatch.delenv("DOCTREE_COMPENSATE_ORPHANED_DOCUMENTS", raising=False)
        settings = Settings(_env_file=None)
        assert settings.database_url.startswith("sqlite+aiosqlite://")
        assert settings.compensate_orphaned_documents is False
        assert settings.log_level == "INFO"

    def test_environment_override(self, monkeypatch):
        monkeypatch.setenv("DOCTREE_DATABASE_URL", "sqlite+aiosqlite:///:memory:")
        monkeypatch.setenv("DOCTREE_COMPENSATE_ORPHANED_DOCUMENTS", "true")
        settings = Settings(_env_file=None)
        assert settings.database_url == "sqlite+aiosqlite:///:memory:"
        assert settings.compensate_orphaned_documents is True

    def test_service_reads_compensation_flag(self, monkeypatch):
        import doctree.domains.tree.services as services_mod

        monkeypatch.setattr(services_mod.settings, "compensate_orphaned_documents", True)
        service = DocumentTreeService.for_session(session=None)
        assert service.compensate_on_failure is True


class TestLogging:

    def test_configure_logging(self):
        logger = logging.getLogger("doctree")
        saved_handlers, saved_level = list(logger.handlers), logger.level
        logger.handlers.clear()
        try:
            configured = configure_logging("debug")
            assert configured is logger
            assert logger.level == logging.DEBUG
            assert len(logger.handlers) == 1

            configure_logging("warning")
            assert logger.level == logging.WARNING
            assert len(logger.handlers) == 1
        finally:
            logger.handlers[:] = saved_handlers
            logger.setLevel(saved_level)
