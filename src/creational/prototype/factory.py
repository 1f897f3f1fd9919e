"""Named constructors for common templates and registry seeding helpers."""

from __future__ import annotations

from pydantic import ValidationError

from creational.domain import CharacterClass, DocumentKind
from creational.exceptions import InvalidArgumentError

from .characters import Character
from .documents import Document
from .registry import PrototypeRegistry
from .shapes import Circle, Rectangle, Triangle

_DOCUMENT_PRESETS: dict[DocumentKind, tuple[str, str, tuple[str, ...]]] = {
    DocumentKind.WORD: ("Microsoft Word Template", "This is a Word document template.", ()),
    DocumentKind.PDF: ("PDF Template", "This is a PDF document template.", ()),
    DocumentKind.POWERPOINT: (
        "PowerPoint Template",
        "This is a presentation template.",
        ("Title Slide", "Introduction", "Content", "Conclusion"),
    ),
    DocumentKind.EXCEL: ("Excel Template", "This is a spreadsheet template.", ()),
}


def create_document(kind: DocumentKind | str, name: str) -> Document:
    """Create a preset document for ``kind``."""

    try:
        resolved = DocumentKind(kind)
    except ValueError as exc:
        msg = f"Unknown document kind {kind!r}"
        raise InvalidArgumentError(msg) from exc
    template, content, pages = _DOCUMENT_PRESETS[resolved]
    return Document(
        name=name,
        document_kind=resolved,
        template=template,
        content=content,
        pages=list(pages),
    )


def create_word_document(name: str) -> Document:
    return create_document(DocumentKind.WORD, name)


def create_pdf_document(name: str) -> Document:
    return create_document(DocumentKind.PDF, name)


def create_presentation_document(name: str) -> Document:
    return create_document(DocumentKind.POWERPOINT, name)


def create_spreadsheet_document(name: str) -> Document:
    return create_document(DocumentKind.EXCEL, name)


def create_character(character_class: CharacterClass | str, name: str) -> Character:
    try:
        resolved = CharacterClass(character_class)
    except ValueError as exc:
        msg = f"Unknown character class {character_class!r}"
        raise InvalidArgumentError(msg) from exc
    return Character(name=name, character_class=resolved)


def create_warrior(name: str) -> Character:
    return create_character(CharacterClass.WARRIOR, name)


def create_mage(name: str) -> Character:
    return create_character(CharacterClass.MAGE, name)


def create_archer(name: str) -> Character:
    return create_character(CharacterClass.ARCHER, name)


def create_rogue(name: str) -> Character:
    return create_character(CharacterClass.ROGUE, name)


def create_circle(name: str, radius: float) -> Circle:
    try:
        return Circle(name=name, radius=radius)
    except ValidationError as exc:
        msg = f"Invalid circle {name!r}: radius must be non-negative"
        raise InvalidArgumentError(msg) from exc


def create_rectangle(name: str, width: float, height: float) -> Rectangle:
    try:
        return Rectangle(name=name, width=width, height=height)
    except ValidationError as exc:
        msg = f"Invalid rectangle {name!r}: dimensions must be non-negative"
        raise InvalidArgumentError(msg) from exc


def create_triangle(name: str, side1: float, side2: float, side3: float) -> Triangle:
    """Create a triangle, rejecting sides that cannot form one."""

    try:
        return Triangle(name=name, sides=(side1, side2, side3))
    except ValidationError as exc:
        msg = f"Invalid triangle {name!r} with sides {side1}, {side2}, {side3}"
        raise InvalidArgumentError(msg) from exc


def register_common_documents(registry: PrototypeRegistry) -> None:
    registry.register("word_template", create_word_document("Document Template"))
    registry.register("pdf_template", create_pdf_document("PDF Template"))
    registry.register(
        "presentation_template", create_presentation_document("Presentation Template")
    )
    registry.register("spreadsheet_template", create_spreadsheet_document("Spreadsheet Template"))


def register_common_characters(registry: PrototypeRegistry) -> None:
    registry.register("warrior_template", create_warrior("Warrior Template"))
    registry.register("mage_template", create_mage("Mage Template"))
    registry.register("archer_template", create_archer("Archer Template"))
    registry.register("rogue_template", create_rogue("Rogue Template"))


def register_common_shapes(registry: PrototypeRegistry) -> None:
    registry.register("circle_template", create_circle("Circle Template", 5.0))
    registry.register("rectangle_template", create_rectangle("Rectangle Template", 10.0, 6.0))
    registry.register("triangle_template", create_triangle("Triangle Template", 3.0, 4.0, 5.0))


def register_defaults(registry: PrototypeRegistry | None = None) -> PrototypeRegistry:
    """Seed ``registry`` (the shared one by default) with every common template."""

    target = registry if registry is not None else PrototypeRegistry.get_instance()
    register_common_documents(target)
    register_common_characters(target)
    register_common_shapes(target)
    return target


__all__ = [
    "create_archer",
    "create_character",
    "create_circle",
    "create_document",
    "create_mage",
    "create_pdf_document",
    "create_presentation_document",
    "create_rectangle",
    "create_rogue",
    "create_spreadsheet_document",
    "create_triangle",
    "create_warrior",
    "create_word_document",
    "register_common_characters",
    "register_common_documents",
    "register_common_shapes",
    "register_defaults",
]
