"""Document prototypes."""

from __future__ import annotations

from typing import Literal

from pydantic import Field

from creational.domain import DocumentKind

from .base import Prototype

_TYPE_LABELS = {
    DocumentKind.WORD: "Word Document",
    DocumentKind.PDF: "PDF Document",
    DocumentKind.POWERPOINT: "PowerPoint Presentation",
    DocumentKind.EXCEL: "Excel Spreadsheet",
}


class Document(Prototype):
    """Office-style document template."""

    kind: Literal["document"] = "document"
    document_kind: DocumentKind
    content: str = ""
    author: str = "Unknown"
    template: str = "Default"
    pages: list[str] = Field(default_factory=list)

    @property
    def page_count(self) -> int:
        return len(self.pages)

    @property
    def type_label(self) -> str:
        return _TYPE_LABELS[self.document_kind]

    def set_content(self, content: str) -> None:
        self.content = content

    def add_page(self, page_content: str) -> None:
        self.pages.append(page_content)

    def set_author(self, author: str) -> None:
        self.author = author

    def set_template(self, template: str) -> None:
        self.template = template


__all__ = ["Document"]
