from __future__ import annotations

import math

import pytest
from pydantic import ValidationError

from creational import InvalidArgumentError
from creational.domain import CharacterClass, DocumentKind
from creational.prototype import (
    AnyShape,
    Character,
    Circle,
    Document,
    Rectangle,
    Stats,
    Triangle,
    clone_prototype,
    create_character,
    create_document,
    create_mage,
    create_presentation_document,
    create_triangle,
    create_warrior,
    dump_prototype,
    is_valid_triangle,
    load_prototype,
)


def test_document_clone_is_independent_both_ways() -> None:
    original = create_presentation_document("Deck")
    original.set_author("Ada")

    copy = original.clone()
    assert copy == original
    assert copy is not original
    assert copy.pages is not original.pages

    original.add_page("Appendix")
    original.set_name("Renamed")
    assert copy.page_count == 4
    assert copy.name == "Deck"

    copy.add_page("Q&A")
    copy.set_content("changed")
    assert original.page_count == 5
    assert original.content == "This is a presentation template."


def test_document_presets() -> None:
    document = create_document("pdf", "Report")
    assert document.document_kind is DocumentKind.PDF
    assert document.template == "PDF Template"
    assert document.author == "Unknown"
    assert document.type_label == "PDF Document"
    assert document.page_count == 0

    with pytest.raises(InvalidArgumentError):
        create_document("odt", "Nope")


def test_character_defaults_follow_class() -> None:
    warrior = create_warrior("Conan")
    assert warrior.stats == Stats(health=150, mana=20, attack=15, defense=12, speed=8, magic=3)
    assert warrior.skills == ["Sword Mastery", "Shield Block", "Berserker Rage"]
    assert warrior.equipment["weapon"] == "Iron Sword"
    assert warrior.level == 1
    assert warrior.class_label == "Warrior"

    mage = create_mage("Merlin")
    assert mage.stats.mana == 120
    assert "Teleport" in mage.skills


def test_character_defaults_are_not_shared_between_instances() -> None:
    first = Character(name="A", character_class=CharacterClass.ROGUE)
    second = Character(name="B", character_class=CharacterClass.ROGUE)
    first.add_skill("Vanish")
    first.set_equipment("weapon", "Shortsword")
    assert "Vanish" not in second.skills
    assert second.equipment["weapon"] == "Dagger"


def test_character_clone_is_deep() -> None:
    original = create_character(CharacterClass.ARCHER, "Robin")
    copy = clone_prototype(original)

    original.add_skill("Volley")
    original.set_equipment("weapon", "Longbow")
    original.set_level(7)
    original.set_stats(Stats(health=1))

    assert "Volley" not in copy.skills
    assert copy.equipment["weapon"] == "Wooden Bow"
    assert copy.level == 1
    assert copy.stats.health == 100

    copy.add_skill("Camouflage")
    assert "Camouflage" not in original.skills


def test_character_rejects_invalid_level_and_class() -> None:
    character = create_warrior("Grunt")
    with pytest.raises(ValidationError):
        character.set_level(0)
    assert character.level == 1

    with pytest.raises(InvalidArgumentError):
        create_character("bard", "Lute")


def test_circle_and_rectangle_geometry() -> None:
    circle = Circle(name="c", radius=2.0)
    assert circle.area() == pytest.approx(math.pi * 4)
    assert circle.perimeter() == pytest.approx(4 * math.pi)

    circle.set_radius(-3)
    assert circle.radius == 0.0

    rectangle = Rectangle(name="r", width=10.0, height=6.0)
    assert rectangle.area() == 60.0
    assert rectangle.perimeter() == 32.0

    rectangle.set_dimensions(-1, 2)
    assert (rectangle.width, rectangle.height) == (0.0, 2.0)


def test_shape_color_is_clamped_and_clone_keeps_style() -> None:
    shape = Rectangle(name="r", width=1.0, height=1.0)
    shape.set_color(300, -5, 128)
    shape.set_position(1.5, -2.0)
    shape.set_visible(False)
    assert (shape.color.r, shape.color.g, shape.color.b) == (255, 0, 128)

    copy = shape.clone()
    shape.set_color(0, 0, 0)
    shape.set_position(0, 0)
    assert (copy.color.r, copy.color.g, copy.color.b) == (255, 0, 128)
    assert (copy.position.x, copy.position.y) == (1.5, -2.0)
    assert copy.visible is False


def test_triangle_area_uses_heron() -> None:
    triangle = Triangle(name="t", sides=(3.0, 4.0, 5.0))
    assert triangle.area() == pytest.approx(6.0)
    assert triangle.perimeter() == 12.0
    assert (triangle.side1, triangle.side2, triangle.side3) == (3.0, 4.0, 5.0)


@pytest.mark.parametrize(
    "sides",
    [(1.0, 1.0, 5.0), (1.0, 2.0, 3.0), (0.0, 4.0, 4.0), (-1.0, 3.0, 3.0)],
)
def test_invalid_triangle_is_rejected(sides: tuple[float, float, float]) -> None:
    assert not is_valid_triangle(*sides)
    with pytest.raises(ValidationError):
        Triangle(name="bad", sides=sides)
    with pytest.raises(InvalidArgumentError):
        create_triangle("bad", *sides)


def test_rejected_set_sides_keeps_previous_geometry() -> None:
    triangle = create_triangle("t", 3.0, 4.0, 5.0)
    with pytest.raises(ValidationError):
        triangle.set_sides(1.0, 1.0, 5.0)
    assert triangle.sides == (3.0, 4.0, 5.0)

    triangle.set_sides(2.0, 2.0, 2.0)
    assert triangle.perimeter() == 6.0


def test_triangle_clone_is_valid_and_independent() -> None:
    original = create_triangle("t", 3.0, 4.0, 5.0)
    copy = original.clone()
    original.set_sides(5.0, 5.0, 5.0)
    assert copy.sides == (3.0, 4.0, 5.0)
    assert is_valid_triangle(*copy.sides)


def test_load_prototype_selects_variant_by_kind() -> None:
    payload = dump_prototype(create_triangle("t", 3.0, 4.0, 5.0))
    loaded = load_prototype(payload)
    assert isinstance(loaded, Triangle)
    assert loaded.area() == pytest.approx(6.0)

    document = load_prototype({"kind": "document", "name": "d", "document_kind": "word"})
    assert isinstance(document, Document)

    with pytest.raises(InvalidArgumentError):
        load_prototype({"kind": "triangle", "name": "bad", "sides": [1, 1, 5]})
    with pytest.raises(InvalidArgumentError):
        load_prototype({"kind": "hexagon", "name": "h"})


@pytest.mark.parametrize(
    "sides",
    [(3.0, 4.0, 5.0), (2.0, 2.0, 3.9), (1.0, 1.0, 2.0), (1.0, 1.0, 5.0), (0.5, 0.5, 0.5)],
)
def test_triangle_validation_agrees_with_is_valid_triangle(
    sides: tuple[float, float, float],
) -> None:
    try:
        Triangle(name="t", sides=sides)
    except ValidationError:
        accepted = False
    else:
        accepted = True
    assert accepted is is_valid_triangle(*sides)


def test_shape_payloads_load_as_shapes() -> None:
    for payload in (
        {"kind": "circle", "name": "c", "radius": 2},
        {"kind": "rectangle", "name": "r", "width": 2, "height": 3},
        {"kind": "triangle", "name": "t", "sides": [3, 4, 5]},
    ):
        loaded = load_prototype(payload)
        assert isinstance(loaded, AnyShape)
        assert loaded.kind == payload["kind"]

    assert not isinstance(create_document("word", "d"), AnyShape)
