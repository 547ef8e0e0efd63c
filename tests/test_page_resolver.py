"""Tests for autowiki.services.page.resolver and PageService."""

import logging
from unittest.mock import MagicMock

import pytest
from openai import OpenAIError

from autowiki.errors import PageSaveError
from autowiki.models import (
    Definition,
    DefinitionEmpty,
    DefinitionFailed,
    NeedsEdit,
    Page,
    PageRendered,
    SaveFailed,
)
from autowiki.services import DefinitionProvider, PageResolver
from tests.conftest import make_openai_response


# ── PageResolver.resolve ────────────────────────────────────────────────────

class TestPageResolverStoredPage:
    def test_renders_stored_page_without_provider_call(self, store, services, openai_client) -> None:
        store.save(Page(title="Home", body=b"Welcome home"))

        result = services.resolver.resolve("Home")

        assert result == PageRendered(page=Page(title="Home", body=b"Welcome home"), source="store")
        openai_client.responses.create.assert_not_called()


class TestPageResolverGeneration:
    def test_generated_text_is_saved_and_rendered(self, services, pages_dir) -> None:
        result = services.resolver.resolve("Gopher")

        assert isinstance(result, PageRendered)
        assert result.source == "generated"
        assert result.page.body == b"A small burrowing rodent."
        assert (pages_dir / "Gopher.txt").read_bytes() == b"A small burrowing rodent."

    def test_second_resolve_reads_from_store(self, services, openai_client) -> None:
        first = services.resolver.resolve("Gopher")
        second = services.resolver.resolve("Gopher")

        assert first.page == second.page
        assert second.source == "store"
        assert openai_client.responses.create.call_count == 1

    def test_provider_error_needs_edit_and_writes_nothing(self, services, openai_client, pages_dir) -> None:
        openai_client.responses.create.side_effect = OpenAIError("connection refused")

        result = services.resolver.resolve("Gopher")

        assert isinstance(result, NeedsEdit)
        assert isinstance(result.cause, DefinitionFailed)
        assert not (pages_dir / "Gopher.txt").exists()

    def test_empty_response_needs_edit_and_writes_nothing(self, services, openai_client, pages_dir) -> None:
        openai_client.responses.create.return_value = make_openai_response("")

        result = services.resolver.resolve("Gopher")

        assert result == NeedsEdit(title="Gopher", cause=DefinitionEmpty(title="Gopher"))
        assert not (pages_dir / "Gopher.txt").exists()

    def test_unreadable_page_is_treated_as_absent(self, services, openai_client, pages_dir) -> None:
        (pages_dir / "Broken.txt").mkdir(parents=True)

        result = services.resolver.resolve("Broken")

        openai_client.responses.create.assert_called_once()
        # Saving over the directory fails too, so the generated page cannot be kept.
        assert isinstance(result, SaveFailed)
        assert result.title == "Broken"
        assert result.error

    def test_save_failure_after_generation(self, store) -> None:
        provider = MagicMock(spec=DefinitionProvider)
        provider.define.return_value = Definition(title="Gopher", text="A rodent.")
        failing_store = MagicMock(wraps=store)
        failing_store.save.side_effect = PageSaveError("Gopher", "disk full")
        resolver = PageResolver(failing_store, provider)

        result = resolver.resolve("Gopher")

        assert result == SaveFailed(title="Gopher", error="disk full")


# ── PageService.edit / save ─────────────────────────────────────────────────

class TestPageServiceEdit:
    def test_missing_page_is_empty_and_provider_not_called(self, services, openai_client) -> None:
        page = services.pages.edit("Fresh")

        assert page == Page(title="Fresh", body=b"")
        openai_client.responses.create.assert_not_called()

    def test_existing_page_is_loaded(self, services, store) -> None:
        store.save(Page(title="Home", body=b"Welcome"))
        assert services.pages.edit("Home").body == b"Welcome"


class TestPageServiceSave:
    def test_saves_utf8_body(self, services, pages_dir) -> None:
        page = services.pages.save("Cafe", "café ☕")

        assert page.body == "café ☕".encode("utf-8")
        assert (pages_dir / "Cafe.txt").read_bytes() == "café ☕".encode("utf-8")

    def test_save_error_propagates(self, services, pages_dir) -> None:
        (pages_dir / "Taken.txt").mkdir(parents=True)
        with pytest.raises(PageSaveError):
            services.pages.save("Taken", "text")

    def test_logs_whether_page_was_created_or_updated(self, services, caplog) -> None:
        with caplog.at_level(logging.INFO, logger="autowiki.services.page.service"):
            services.pages.save("Notes", "first")
            services.pages.save("Notes", "second")

        messages = [r.getMessage() for r in caplog.records if r.name == "autowiki.services.page.service"]
        assert messages == ["Created page Notes", "Updated page Notes"]
