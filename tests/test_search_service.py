"""Tests for permission-gated repository search."""

from pathlib import Path

import httpx
import pytest

from repox.core.options_store import OptionsStore
from repox.models.context import Actor, RequestContext
from repox.models.options import RepositoryOptions, TenantScope
from repox.models.repository import ItemKind
from repox.services.access import AccessPolicy
from repox.services.repository import RepositoryClient, RepositorySearchService


def make_service(
    tmp_path: Path, captured: list[httpx.Request], repo_url: str = "https://x.test/", status: int = 200
) -> RepositorySearchService:
    def respond(request: httpx.Request) -> httpx.Response:
        captured.append(request)
        return httpx.Response(status, json=[{"name": "Acme", "slug": "acme"}])

    store = OptionsStore(tmp_path / "options.yaml")
    store.save(TenantScope.SINGLE_SITE, {"repo_url": repo_url})
    client = RepositoryClient(transport=httpx.MockTransport(respond))
    return RepositorySearchService(store, client, AccessPolicy())


def ctx_with(*capabilities: str) -> RequestContext:
    return RequestContext(actor=Actor(id="editor", capabilities=frozenset(capabilities)))


@pytest.mark.asyncio
async def test_search_returns_repository_payload(tmp_path: Path) -> None:
    captured: list[httpx.Request] = []
    service = make_service(tmp_path, captured)

    result = await service.search(ctx_with("install_plugins"), ItemKind.PLUGIN, "  <b>seo</b> ")

    assert result == [{"name": "Acme", "slug": "acme"}]
    assert captured[0].url.params["query"] == "seo"


@pytest.mark.asyncio
async def test_search_without_permission_makes_no_request(tmp_path: Path) -> None:
    captured: list[httpx.Request] = []
    service = make_service(tmp_path, captured)

    result = await service.search(ctx_with("install_plugins"), ItemKind.THEME, "dark")

    assert result == {"error": "You do not have permission to install themes."}
    assert captured == []


@pytest.mark.asyncio
async def test_search_failure_is_reported_as_error_payload(tmp_path: Path) -> None:
    captured: list[httpx.Request] = []
    service = make_service(tmp_path, captured, status=500)

    result = await service.search(ctx_with("install_themes"), ItemKind.THEME)

    assert result == {"error": "Repository returned error: 500"}


@pytest.mark.asyncio
async def test_search_without_repository_url(tmp_path: Path) -> None:
    captured: list[httpx.Request] = []
    service = make_service(tmp_path, captured, repo_url="")

    result = await service.search(ctx_with("install_plugins"), ItemKind.PLUGIN, "seo")

    assert result == {"error": "Repository URL is not configured."}
    assert captured == []


@pytest.mark.asyncio
async def test_search_with_broken_options_file(tmp_path: Path) -> None:
    captured: list[httpx.Request] = []
    service = make_service(tmp_path, captured)
    service.options_store.options_file.write_text("site: [unclosed\n", encoding="utf-8")

    result = await service.search(ctx_with("install_plugins"), ItemKind.PLUGIN)

    assert result == {"error": "Repository URL is not configured."}
    assert captured == []


@pytest.mark.asyncio
async def test_search_with_unparsable_repository_url(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    captured: list[httpx.Request] = []
    service = make_service(tmp_path, captured)
    bad_options = RepositoryOptions(repo_url="https://x.test:abc/")
    monkeypatch.setattr(service.options_store, "load", lambda scope: bad_options)

    result = await service.search(ctx_with("install_plugins"), ItemKind.PLUGIN, "seo")

    assert "error" in result
    assert result["error"].startswith("Repository URL is invalid")
    assert captured == []
