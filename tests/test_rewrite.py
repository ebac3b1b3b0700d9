"""Tests for the OpenRouter rewrite collaborator."""

import json

import httpx
import pytest

from add_header.rewrite import (
    OpenRouterRewriter,
    RewriteSettings,
    build_rewriter,
    extract_completion,
    strip_code_fence,
)


def _settings(**overrides) -> RewriteSettings:
    values = {"token": "sk-test", "enabled": "true"}
    values.update(overrides)
    return RewriteSettings.from_values(**values)


def _completion(content) -> dict:
    return {"choices": [{"message": {"role": "assistant", "content": content}}]}


@pytest.mark.parametrize(
    "token, enabled, active",
    [
        ("sk", "true", True),
        ("sk", "TRUE", True),
        ("sk", "1", True),
        ("sk", "false", False),
        ("sk", None, False),
        (None, "true", False),
        ("", "true", False),
    ],
)
def test_settings_require_token_and_flag(token, enabled, active) -> None:
    settings = RewriteSettings.from_values(token=token, enabled=enabled)
    assert settings.active is active
    assert (build_rewriter(settings) is not None) is active


def test_settings_defaults() -> None:
    settings = _settings()
    assert settings.model == "deepseek/deepseek-coder"
    assert settings.base_url == "https://openrouter.ai/api/v1"
    assert settings.timeout_s == 60.0


def test_build_request_shape() -> None:
    rewriter = OpenRouterRewriter(_settings(model="m/x", base_url="https://llm.local/v1/"))
    headers, body = rewriter.build_request("src\\a.ts", "code\n")
    assert rewriter.url == "https://llm.local/v1/chat/completions"
    assert headers["Authorization"] == "Bearer sk-test"
    assert headers["X-Title"] == "add-header-pr"
    assert body["model"] == "m/x"
    assert body["temperature"] == 0
    assert body["messages"][0]["role"] == "system"
    assert body["messages"][1] == {"role": "user", "content": "path=src/a.ts\ncode\n"}


def test_extract_completion_tolerates_bad_payloads() -> None:
    assert extract_completion(_completion("x")) == "x"
    assert extract_completion({}) == ""
    assert extract_completion({"choices": []}) == ""
    assert extract_completion(_completion(None)) == ""


def test_strip_code_fence() -> None:
    assert strip_code_fence("```ts\n// a.ts\nx()\n```") == "// a.ts\nx()\n"
    assert strip_code_fence("// a.ts\nx()\n") == "// a.ts\nx()\n"


@pytest.mark.asyncio
async def test_rewriter_posts_and_returns_content() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json=_completion("// a.ts\nx()\n"))

    rewriter = OpenRouterRewriter(_settings(), transport=httpx.MockTransport(handler))
    result = await rewriter("a.ts", "x()\n", "// a.ts\nx()\n")

    assert result == "// a.ts\nx()\n"
    assert len(seen) == 1
    assert seen[0].url == "https://openrouter.ai/api/v1/chat/completions"
    assert json.loads(seen[0].content)["messages"][1]["content"] == "path=a.ts\nx()\n"


@pytest.mark.asyncio
async def test_rewriter_empty_content_returns_none() -> None:
    transport = httpx.MockTransport(lambda request: httpx.Response(200, json=_completion("")))
    rewriter = OpenRouterRewriter(_settings(), transport=transport)
    assert await rewriter("a.ts", "x()\n", "// a.ts\nx()\n") is None


@pytest.mark.asyncio
async def test_rewriter_http_error_raises() -> None:
    transport = httpx.MockTransport(lambda request: httpx.Response(503, text="busy"))
    rewriter = OpenRouterRewriter(_settings(), transport=transport)
    with pytest.raises(httpx.HTTPStatusError):
        await rewriter("a.ts", "x()\n", "// a.ts\nx()\n")
