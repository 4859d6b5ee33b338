"""Tests for Entity and ValueObject equality semantics."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from appstate.domain.identity import Entity, ValueObject


class _Order(Entity[int]):
    total: float = 0.0


class _Invoice(Entity[int]):
    pass


class _Sku(ValueObject[str]):
    pass


class _Label(ValueObject[str]):
    pass


class TestEntity:
    @pytest.mark.parametrize(
        ("a", "b"),
        [(1, 1), (1, 2), ("x", "x"), ("x", "y"), ((1, 2), (1, 2))],
    )
    def test_equality_follows_identifier(self, a: object, b: object) -> None:
        assert Entity(id=a).equals(Entity(id=b)) == (a == b)
        assert (Entity(id=a) == Entity(id=b)) == (a == b)

    def test_other_attributes_ignored(self) -> None:
        assert _Order(id=7, total=1.0).equals(_Order(id=7, total=99.0))
        assert _Order(id=7, total=1.0) == _Order(id=7, total=99.0)

    def test_compares_by_value_not_reference(self) -> None:
        left = Entity(id="user-" + "1")
        right = Entity(id="".join(["user-", "1"]))
        assert left.equals(right)

    def test_non_entity_is_never_equal(self) -> None:
        order = _Order(id=7)
        assert order.equals(7) is False
        assert order.equals(None) is False
        assert order.equals(ValueObject(7)) is False
        assert order != 7

    def test_unrelated_entity_kinds_are_not_equal(self) -> None:
        assert not _Order(id=1).equals(_Invoice(id=1))

    def test_base_and_subclass_share_lineage(self) -> None:
        assert Entity(id=1).equals(_Order(id=1))
        assert _Order(id=1).equals(Entity(id=1))

    def test_id_is_immutable(self) -> None:
        order = _Order(id=7)
        with pytest.raises(ValidationError):
            order.id = 8  # type: ignore[misc]
        assert order.id == 7

    def test_other_attributes_stay_mutable(self) -> None:
        order = _Order(id=7, total=1.0)
        order.total = 5.0
        assert order.total == 5.0

    def test_hash_follows_identifier(self) -> None:
        assert len({_Order(id=1, total=1.0), _Order(id=1, total=2.0), _Order(id=2)}) == 2


class TestValueObject:
    @pytest.mark.parametrize(("a", "b"), [(1, 1), (1, 2), ("a", "a"), ("a", "b")])
    def test_equality_follows_value(self, a: object, b: object) -> None:
        assert ValueObject(a).equals(ValueObject(b)) == (a == b)
        assert (ValueObject(a) == ValueObject(b)) == (a == b)

    def test_structural_equality(self) -> None:
        assert ValueObject([1, 2, 3]).equals(ValueObject([1, 2, 3]))

    def test_value_accessor(self) -> None:
        assert _Sku("abc").value == "abc"

    def test_non_value_object_is_never_equal(self) -> None:
        assert _Sku("abc").equals("abc") is False
        assert _Sku("abc").equals(Entity(id="abc")) is False

    def test_unrelated_kinds_are_not_equal(self) -> None:
        assert not _Sku("abc").equals(_Label("abc"))

    def test_immutable(self) -> None:
        sku = _Sku("abc")
        with pytest.raises(ValidationError):
            sku.value = "xyz"  # type: ignore[misc]

    def test_hashable(self) -> None:
        assert len({_Sku("a"), _Sku("a"), _Sku("b")}) == 2

    def test_serializes_as_bare_value(self) -> None:
        assert _Sku("abc").model_dump() == "abc"
        assert _Sku.model_validate("abc") == _Sku("abc")
