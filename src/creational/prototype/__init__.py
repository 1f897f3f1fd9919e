"""Prototype layer public exports."""

from .base import Prototype
from .characters import CLASS_DEFAULTS, Character, Stats
from .documents import Document
from .factory import (
    create_archer,
    create_character,
    create_circle,
    create_document,
    create_mage,
    create_pdf_document,
    create_presentation_document,
    create_rectangle,
    create_rogue,
    create_spreadsheet_document,
    create_triangle,
    create_warrior,
    create_word_document,
    register_common_characters,
    register_common_documents,
    register_common_shapes,
    register_defaults,
)
from .registry import PrototypeRegistry
from .shapes import AnyShape, Circle, Color, Position, Rectangle, Shape, Triangle, is_valid_triangle
from .variants import AnyPrototype, clone_prototype, dump_prototype, load_prototype

__all__ = [
    "CLASS_DEFAULTS",
    "AnyPrototype",
    "AnyShape",
    "Character",
    "Circle",
    "Color",
    "Document",
    "Position",
    "Prototype",
    "PrototypeRegistry",
    "Rectangle",
    "Shape",
    "Stats",
    "Triangle",
    "clone_prototype",
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
    "dump_prototype",
    "is_valid_triangle",
    "load_prototype",
    "register_common_characters",
    "register_common_documents",
    "register_common_shapes",
    "register_defaults",
]
