"""Shared pytest fixtures for store, provider, resolver and route tests."""

from pathlib import Path
from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest
from flask import Flask
from flask.testing import FlaskClient

from app import create_app
from autowiki.services import DefinitionProvider, PageResolver, PageService, WikiServices
from autowiki.stores import PageStore

TEST_MODEL = "test-model"


# ---------------------------------------------------------------------------
# OpenAI mock helpers
# ---------------------------------------------------------------------------

def make_openai_response(text: str | None, *, segments: list[str] | None = None) -> SimpleNamespace:
    """Return an object shaped like an OpenAI Responses API response.

    With segments, the response carries one output message whose content parts
    are those texts; otherwise only the aggregated output_text is set.
    """
    output: list[SimpleNamespace] = []
    if segments is not None:
        output.append(
            SimpleNamespace(
                type="message",
                content=[SimpleNamespace(type="output_text", text=s) for s in segments],
            )
        )
    return SimpleNamespace(output=output, output_text=text)


def make_openai_client(text: str | None = "A small burrowing rodent.") -> MagicMock:
    mock_client = MagicMock()
    mock_client.responses.create.return_value = make_openai_response(text)
    return mock_client


# ---------------------------------------------------------------------------
# Services
# ---------------------------------------------------------------------------

@pytest.fixture
def pages_dir(tmp_path: Path) -> Path:
    return tmp_path / "pages"


@pytest.fixture
def store(pages_dir: Path) -> PageStore:
    return PageStore(pages_dir)


@pytest.fixture
def openai_client() -> MagicMock:
    return make_openai_client()


@pytest.fixture
def provider(openai_client: MagicMock) -> DefinitionProvider:
    return DefinitionProvider(openai_client, model=TEST_MODEL, max_output_tokens=60)


@pytest.fixture
def services(store: PageStore, provider: DefinitionProvider) -> WikiServices:
    resolver = PageResolver(store, provider)
    return WikiServices(
        store=store,
        provider=provider,
        resolver=resolver,
        pages=PageService(store, resolver),
    )


# ---------------------------------------------------------------------------
# Flask
# ---------------------------------------------------------------------------

@pytest.fixture
def app(services: WikiServices) -> Flask:
    flask_app = create_app(services)
    flask_app.config["TESTING"] = True
    return flask_app


@pytest.fixture
def client(app: Flask) -> FlaskClient:
    return app.test_client()
