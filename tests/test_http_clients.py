"""Tests for HTTP-based adapters."""

import asyncio
import json

import httpx
import pytest

from nutriscan.adapters.fdc_client import FdcConfig, HttpxFdcClient
from nutriscan.adapters.off_client import HttpxOpenFoodFactsClient, OpenFoodFactsConfig
from nutriscan.adapters.openai_recipe_client import OpenAIRecipeClient
from nutriscan.domain.errors import ConfigurationError, ProviderError
from nutriscan.services.providers import FdcSearchProvider


class _FakeResponses:
    def __init__(self) -> None:
        self.last_payload: dict[str, object] | None = None

    async def create(self, **kwargs):  # type: ignore[no-untyped-def]
        self.last_payload = kwargs
        return type("Resp", (), {"output_text": json.dumps({"recipes": []})})()


class _FakeOpenAI:
    def __init__(self) -> None:
        self.responses = _FakeResponses()


def test_openai_recipe_client_parses_output() -> None:
    fake = _FakeOpenAI()
    client = OpenAIRecipeClient(client=fake)

    result = asyncio.run(
        client.generate(
            model="gpt-5.2",
            reasoning_effort="low",
            store=False,
            schema={"type": "object"},
            prompt="Recipes with lentils",
        )
    )

    assert result == {"recipes": []}
    assert fake.responses.last_payload is not None
    assert fake.responses.last_payload["reasoning"] == {"effort": "low"}
    assert fake.responses.last_payload["text"]["format"]["name"] == "recipe_ideas"


def test_fdc_client_posts_search() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={"foods": []})

    client = HttpxFdcClient(
        config=FdcConfig(api_key="key", base_url="https://api.test"),
        http_client=httpx.AsyncClient(transport=httpx.MockTransport(handler)),
    )

    payload = asyncio.run(client.search_foods("rice", page_size=5))

    assert payload == {"foods": []}
    assert seen[0].method == "POST"
    assert seen[0].url.path == "/foods/search"
    assert seen[0].url.params["api_key"] == "key"
    body = json.loads(seen[0].content.decode())
    assert body["query"] == "rice"
    assert body["pageSize"] == 5
    assert "Branded" in body["dataType"]


def test_fdc_client_reports_missing_key() -> None:
    client = HttpxFdcClient(
        config=FdcConfig(api_key=None),
        http_client=httpx.AsyncClient(),
    )

    assert client.has_credentials is False
    asyncio.run(client.close())


def test_fdc_http_error_becomes_provider_error() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(503, json={"error": "maintenance"})

    client = HttpxFdcClient(
        config=FdcConfig(api_key="key", base_url="https://api.test"),
        http_client=httpx.AsyncClient(transport=httpx.MockTransport(handler)),
    )

    with pytest.raises(ProviderError) as excinfo:
        asyncio.run(FdcSearchProvider(client).search("rice"))

    assert excinfo.value.cause == "HTTP 503"


def test_off_client_search_and_product() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.headers["User-Agent"] == "NutriScan-Test/1.0"
        if request.url.path == "/cgi/search.pl":
            assert request.url.params["search_terms"] == "cola"
            assert request.url.params["json"] == "1"
            return httpx.Response(200, json={"products": []})
        if request.url.path == "/api/v2/product/3017620422003.json":
            return httpx.Response(200, json={"status": 1, "product": {}})
        return httpx.Response(404, json={"status": 0})

    config = OpenFoodFactsConfig(
        base_url="https://off.test", user_agent="NutriScan-Test/1.0"
    )
    client = HttpxOpenFoodFactsClient(
        config=config,
        http_client=httpx.AsyncClient(
            transport=httpx.MockTransport(handler),
            headers={"User-Agent": config.user_agent},
        ),
    )

    search = asyncio.run(client.search_products("cola"))
    product = asyncio.run(client.get_product("3017620422003"))
    missing = asyncio.run(client.get_product("0000000000000"))

    assert search == {"products": []}
    assert product == {"status": 1, "product": {}}
    assert missing is None


def test_off_client_raises_on_server_error() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(500)

    client = HttpxOpenFoodFactsClient(
        config=OpenFoodFactsConfig(base_url="https://off.test"),
        http_client=httpx.AsyncClient(transport=httpx.MockTransport(handler)),
    )

    with pytest.raises(httpx.HTTPStatusError):
        asyncio.run(client.get_product("3017620422003"))


def test_openai_recipe_client_without_key() -> None:
    client = OpenAIRecipeClient.create(None)

    assert client.has_credentials is False
    with pytest.raises(ConfigurationError):
        asyncio.run(
            client.generate(
                model="gpt-5.2",
                reasoning_effort=None,
                store=False,
                schema={"type": "object"},
                prompt="Recipes with lentils",
            )
        )
    asyncio.run(client.close())


def test_openai_recipe_client_with_key() -> None:
    client = OpenAIRecipeClient.create("sk-test")

    assert client.has_credentials is True
    asyncio.run(client.close())
