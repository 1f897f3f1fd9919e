"""Domain layer exports."""

from .base import TemplateModel, ValueModel, utc_now
from .enums import CharacterClass, DocumentKind, HttpMethod, LogLevel, PaymentKind

__all__ = [
    "CharacterClass",
    "DocumentKind",
    "HttpMethod",
    "LogLevel",
    "PaymentKind",
    "TemplateModel",
    "ValueModel",
    "utc_now",
]
