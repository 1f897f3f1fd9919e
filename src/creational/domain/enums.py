"""Enumerations used across the creational domain layer."""

from __future__ import annotations

from enum import IntEnum, StrEnum


class LogLevel(IntEnum):
    """Ordered severity levels retained by the application logger."""

    DEBUG = 0
    INFO = 1
    WARN = 2
    ERROR = 3

    @classmethod
    def parse(cls, value: str | int | LogLevel) -> LogLevel:
        if isinstance(value, LogLevel):
            return value
        if isinstance(value, int):
            return cls(value)
        normalized = value.strip().upper()
        if normalized == "WARNING":
            normalized = "WARN"
        try:
            return cls[normalized]
        except KeyError as exc:
            msg = f"Unknown log level {value!r}"
            raise ValueError(msg) from exc


class DocumentKind(StrEnum):
    """Document variants available as prototypes."""

    WORD = "word"
    PDF = "pdf"
    POWERPOINT = "powerpoint"
    EXCEL = "excel"


class CharacterClass(StrEnum):
    """Playable character archetypes."""

    WARRIOR = "warrior"
    MAGE = "mage"
    ARCHER = "archer"
    ROGUE = "rogue"


class HttpMethod(StrEnum):
    """Request methods accepted by the HTTP request builder."""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    PATCH = "PATCH"
    DELETE = "DELETE"
    HEAD = "HEAD"
    OPTIONS = "OPTIONS"


class PaymentKind(StrEnum):
    """Payment processor discriminators accepted by the factory."""

    CREDIT = "credit"
    PAYPAL = "paypal"
