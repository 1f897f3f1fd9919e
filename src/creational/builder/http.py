"""Fluent construction of HTTP request descriptions; nothing is sent."""

from __future__ import annotations

import json
from typing import Annotated, Any, Self

from pydantic import Field

from creational.domain import HttpMethod, TemplateModel
from creational.exceptions import InvalidArgumentError

DEFAULT_TIMEOUT_MS = 30_000
JSON_CONTENT_TYPE = "application/json"


class HttpRequest(TemplateModel):
    method: HttpMethod = HttpMethod.GET
    url: str = Field(min_length=1)
    headers: list[tuple[str, str]] = Field(default_factory=list)
    body: str = ""
    timeout_ms: Annotated[int, Field(ge=0)] = DEFAULT_TIMEOUT_MS
    retries: Annotated[int, Field(ge=0)] = 0

    def header(self, name: str) -> str | None:
        """Return the first value of header ``name``, matched case-insensitively."""

        wanted = name.casefold()
        for key, value in self.headers:
            if key.casefold() == wanted:
                return value
        return None


class HttpRequestBuilder:
    """Accumulates request parts until :meth:`build`, which resets the builder."""

    def __init__(self) -> None:
        self._reset()

    def _reset(self) -> None:
        self._method = HttpMethod.GET
        self._url = ""
        self._headers: list[tuple[str, str]] = []
        self._body = ""
        self._timeout_ms = DEFAULT_TIMEOUT_MS
        self._retries = 0

    @classmethod
    def get(cls, url: str) -> HttpRequestBuilder:
        return cls().method(HttpMethod.GET).url(url)

    @classmethod
    def post(cls, url: str) -> HttpRequestBuilder:
        return cls().method(HttpMethod.POST).url(url)

    @classmethod
    def put(cls, url: str) -> HttpRequestBuilder:
        return cls().method(HttpMethod.PUT).url(url)

    @classmethod
    def delete(cls, url: str) -> HttpRequestBuilder:
        return cls().method(HttpMethod.DELETE).url(url)

    def method(self, method: HttpMethod | str) -> Self:
        try:
            self._method = HttpMethod(method.strip().upper())
        except ValueError as exc:
            msg = f"Unsupported HTTP method {method!r}"
            raise InvalidArgumentError(msg) from exc
        return self

    def url(self, url: str) -> Self:
        if not url.strip():
            msg = "URL must not be empty"
            raise InvalidArgumentError(msg)
        self._url = url.strip()
        return self

    def header(self, name: str, value: str) -> Self:
        if not name.strip():
            msg = "Header name must not be empty"
            raise InvalidArgumentError(msg)
        self._headers.append((name.strip(), value))
        return self

    def body(self, body: str) -> Self:
        self._body = body
        return self

    def json(self, data: Any) -> Self:
        """Set a JSON body; strings are taken as already encoded."""

        self._body = data if isinstance(data, str) else json.dumps(data)
        self._headers = [
            (name, value) for name, value in self._headers if name.casefold() != "content-type"
        ]
        self._headers.append(("Content-Type", JSON_CONTENT_TYPE))
        return self

    def timeout(self, ms: int) -> Self:
        if ms < 0:
            msg = f"Timeout must be non-negative, got {ms}"
            raise InvalidArgumentError(msg)
        self._timeout_ms = ms
        return self

    def retries(self, count: int) -> Self:
        if count < 0:
            msg = f"Retries must be non-negative, got {count}"
            raise InvalidArgumentError(msg)
        self._retries = count
        return self

    def build(self) -> HttpRequest:
        if not self._url:
            msg = "A URL is required"
            raise InvalidArgumentError(msg)
        request = HttpRequest(
            method=self._method,
            url=self._url,
            headers=self._headers,
            body=self._body,
            timeout_ms=self._timeout_ms,
            retries=self._retries,
        )
        self._reset()
        return request


__all__ = ["DEFAULT_TIMEOUT_MS", "HttpRequest", "HttpRequestBuilder"]
