"""Optional LLM rewrite step over an OpenRouter-compatible chat API."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Optional

import httpx

from add_header.constants import (
    OPENROUTER_BASE_URL,
    OPENROUTER_MODEL,
    OPENROUTER_REFERER,
    OPENROUTER_TIMEOUT_S,
    OPENROUTER_TITLE,
)
from add_header.utils import is_truthy, to_posix

Rewriter = Callable[[str, str, str], Awaitable[Optional[str]]]

SYSTEM_PROMPT = (
    "You are an idempotent formatter. Return the full file content and nothing else. "
    "The first line must be a comment holding the file's relative path, using the "
    "comment syntax of the file's language; when the file starts with a required "
    "shebang line, put the comment right after it. If that comment is already present, "
    "return the content unchanged. Never add other comments or change anything else."
)

_FENCE_RE = re.compile(r"\A```[^\n]*\n(.*?)\n?```\s*\Z", re.DOTALL)


@dataclass(frozen=True)
class RewriteSettings:
    token: Optional[str] = None
    enabled: bool = False
    model: str = OPENROUTER_MODEL
    base_url: str = OPENROUTER_BASE_URL
    timeout_s: float = OPENROUTER_TIMEOUT_S

    @classmethod
    def from_values(
        cls,
        token: Optional[str],
        enabled: Optional[str],
        model: Optional[str] = None,
        base_url: Optional[str] = None,
        timeout_s: Optional[float] = None,
    ) -> "RewriteSettings":
        return cls(
            token=token or None,
            enabled=is_truthy(enabled),
            model=model or OPENROUTER_MODEL,
            base_url=base_url or OPENROUTER_BASE_URL,
            timeout_s=timeout_s if timeout_s is not None else OPENROUTER_TIMEOUT_S,
        )

    @property
    def active(self) -> bool:
        return bool(self.token) and self.enabled


def strip_code_fence(text: str) -> str:
    match = _FENCE_RE.match(text.strip())
    if match is None:
        return text
    return match.group(1) + "\n"


def extract_completion(payload: Any) -> str:
    try:
        content = payload["choices"][0]["message"]["content"]
    except (KeyError, IndexError, TypeError):
        return ""
    return content if isinstance(content, str) else ""


class OpenRouterRewriter:
    def __init__(
        self,
        settings: RewriteSettings,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self._settings = settings
        self._transport = transport

    @property
    def url(self) -> str:
        return self._settings.base_url.rstrip("/") + "/chat/completions"

    def build_request(self, rel_path: str, content: str) -> tuple[dict[str, str], dict[str, Any]]:
        headers = {
            "Authorization": f"Bearer {self._settings.token}",
            "Content-Type": "application/json",
            "HTTP-Referer": OPENROUTER_REFERER,
            "X-Title": OPENROUTER_TITLE,
        }
        body = {
            "model": self._settings.model,
            "messages": [
                {"role": "system", "content": SYSTEM_PROMPT},
                {"role": "user", "content": f"path={to_posix(rel_path)}\n{content}"},
            ],
            "temperature": 0,
        }
        return headers, body

    async def __call__(self, rel_path: str, original: str, target: str) -> Optional[str]:
        headers, body = self.build_request(rel_path, original)
        async with httpx.AsyncClient(
            timeout=self._settings.timeout_s, transport=self._transport
        ) as client:
            response = await client.post(self.url, headers=headers, json=body)
            response.raise_for_status()
            payload = response.json()

        text = extract_completion(payload)
        if not text.strip():
            return None
        return strip_code_fence(text)


def build_rewriter(
    settings: RewriteSettings,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> Optional[Rewriter]:
    if not settings.active:
        return None
    return OpenRouterRewriter(settings, transport=transport)
