from __future__ import annotations

from collections.abc import Callable

import pytest

from creational import InvalidArgumentError
from creational.builder import (
    DEFAULT_TIMEOUT_MS,
    Computer,
    ComputerBuilder,
    ComputerDirector,
    HttpRequestBuilder,
    SQLQueryBuilder,
)
from creational.domain import HttpMethod


def test_computer_builder_resets_after_build() -> None:
    builder = ComputerBuilder()
    first = builder.cpu("Intel i7-12700").memory("16GB DDR4").warranty(2).build()
    second = builder.storage("512GB SSD").build()

    assert first.cpu == "Intel i7-12700"
    assert first.warranty_years == 2
    assert second.cpu == ""
    assert second.storage == "512GB SSD"
    assert second.warranty_years == 0
    assert first is not second


def test_computer_builder_rejects_negative_warranty() -> None:
    builder = ComputerBuilder().cpu("Intel i5")
    with pytest.raises(InvalidArgumentError):
        builder.warranty(-1)
    assert builder.build().cpu == "Intel i5"


@pytest.mark.parametrize(
    ("preset", "warranty", "price"),
    [("gaming", 3, 1700.0), ("office", 1, 450.0), ("workstation", 5, 1150.0)],
)
def test_director_presets(preset: str, warranty: int, price: float) -> None:
    computer = ComputerDirector().build_preset(preset)
    assert isinstance(computer, Computer)
    assert computer.warranty_years == warranty
    assert computer.estimated_price() == price


def test_director_reuses_its_builder() -> None:
    builder = ComputerBuilder()
    director = ComputerDirector(builder)

    gaming = director.build_gaming_computer()
    office = director.build_office_computer()

    assert gaming.graphics == "NVIDIA RTX 4080"
    assert office.graphics == "Integrated Intel UHD"
    assert builder.build() == Computer()
    assert director.build_workstation_computer().memory == "64GB DDR5-4800"

    with pytest.raises(InvalidArgumentError):
        director.build_preset("server")


def test_sql_builder_renders_every_clause() -> None:
    query = (
        SQLQueryBuilder()
        .select("u.name", "COUNT(o.id) AS orders")
        .from_("users u")
        .left_join("orders o", "o.user_id = u.id")
        .where("u.active = 1")
        .where("u.age > 18")
        .group_by("u.name")
        .having("COUNT(o.id) > 5")
        .order_by("orders", "desc")
        .limit(10)
        .offset(20)
        .build()
    )

    assert query.to_sql() == (
        "SELECT u.name, COUNT(o.id) AS orders FROM users u"
        " LEFT JOIN orders o ON o.user_id = u.id"
        " WHERE u.active = 1 AND u.age > 18"
        " GROUP BY u.name HAVING COUNT(o.id) > 5"
        " ORDER BY orders DESC LIMIT 10 OFFSET 20"
    )


def test_sql_builder_resets_after_build() -> None:
    builder = SQLQueryBuilder()
    first = builder.select("id").from_("users").join("teams t", "t.id = team_id").build()
    second = builder.from_("products").build()

    assert first.to_sql() == "SELECT id FROM users JOIN teams t ON t.id = team_id"
    assert second.to_sql() == "SELECT * FROM products"
    assert second.limit is None


def test_sql_builder_requires_a_table() -> None:
    builder = SQLQueryBuilder().select("id").where("id = 1")
    with pytest.raises(InvalidArgumentError):
        builder.build()

    query = builder.from_("users").build()
    assert query.to_sql() == "SELECT id FROM users WHERE id = 1"


@pytest.mark.parametrize(
    "step",
    [
        lambda b: b.limit(-1),
        lambda b: b.offset(-5),
        lambda b: b.from_("  "),
        lambda b: b.where(""),
        lambda b: b.order_by("name", "sideways"),
    ],
)
def test_sql_builder_rejects_invalid_input(step: Callable[[SQLQueryBuilder], object]) -> None:
    with pytest.raises(InvalidArgumentError):
        step(SQLQueryBuilder())


def test_http_builder_json_sets_content_type() -> None:
    request = (
        HttpRequestBuilder.post("https://api.example.com/users")
        .header("Authorization", "Bearer token")
        .json({"name": "Ada"})
        .timeout(5000)
        .retries(3)
        .build()
    )

    assert request.method is HttpMethod.POST
    assert request.url == "https://api.example.com/users"
    assert request.body == '{"name": "Ada"}'
    assert request.header("content-type") == "application/json"
    assert request.header("Authorization") == "Bearer token"
    assert request.timeout_ms == 5000
    assert request.retries == 3


def test_http_builder_json_replaces_existing_content_type() -> None:
    request = (
        HttpRequestBuilder.put("https://api.example.com/items/1")
        .header("Content-Type", "text/plain")
        .json('{"id": 1}')
        .build()
    )
    assert request.headers == [("Content-Type", "application/json")]
    assert request.body == '{"id": 1}'


def test_http_static_constructors_and_reset() -> None:
    builder = HttpRequestBuilder.delete("https://api.example.com/items/1")
    deleted = builder.retries(1).build()
    assert deleted.method is HttpMethod.DELETE

    fetched = builder.url("https://api.example.com/items").build()
    assert fetched.method is HttpMethod.GET
    assert fetched.retries == 0
    assert fetched.timeout_ms == DEFAULT_TIMEOUT_MS
    assert fetched.header("Content-Type") is None

    assert HttpRequestBuilder.get("https://example.com").build().method is HttpMethod.GET
    assert HttpRequestBuilder().method("patch").url("https://example.com").build().method == "PATCH"


def test_http_builder_rejects_invalid_input() -> None:
    builder = HttpRequestBuilder()
    with pytest.raises(InvalidArgumentError):
        builder.timeout(-1)
    with pytest.raises(InvalidArgumentError):
        builder.retries(-2)
    with pytest.raises(InvalidArgumentError):
        builder.method("FETCH")
    with pytest.raises(InvalidArgumentError):
        builder.header(" ", "x")
    with pytest.raises(InvalidArgumentError):
        builder.build()
