from __future__ import annotations

import dataclasses

import pytest

from lawful import Lens, attr_lens, key_lens, lens


def name_lens() -> Lens[dict[str, object], object]:
    return lens(
        lambda person: person["name"],
        lambda name, person: {**person, "name": name},
    )


LENSES = [name_lens(), key_lens("name")]


@pytest.mark.parametrize("name", LENSES)
class TestLensLaws:
    def test_set_get(self, name: Lens) -> None:
        s = {"name": "John", "age": 30}
        assert name.set(name.get(s), s) == s

    def test_get_set(self, name: Lens) -> None:
        s = {"name": "John", "age": 30}
        assert name.get(name.set("Jane", s)) == "Jane"

    def test_set_set(self, name: Lens) -> None:
        s = {"name": "John", "age": 30}
        assert name.set("B", name.set("A", s)) == name.set("B", s)


def test_rename_keeps_other_fields() -> None:
    person = {"name": "John", "age": 30}
    renamed = name_lens().set("Johnny", person)
    assert renamed == {"name": "Johnny", "age": 30}
    assert person == {"name": "John", "age": 30}


def test_modify() -> None:
    assert key_lens("age").modify(lambda a: a + 1, {"age": 1}) == {"age": 2}


class TestAttrLens:
    def test_frozen_dataclass(self, person) -> None:
        name = attr_lens("name")
        renamed = name.set(name.get(person) + "ny", person)
        assert renamed == dataclasses.replace(person, name="Johnny")
        assert renamed.age == 30
        assert person.name == "John"

    def test_laws(self, person) -> None:
        age = attr_lens("age")
        assert age.set(age.get(person), person) == person
        assert age.get(age.set(41, person)) == 41
        assert age.set(2, age.set(1, person)) == age.set(2, person)

    def test_unknown_field(self, person) -> None:
        with pytest.raises(ValueError):
            attr_lens("email").get(person)

    def test_not_a_dataclass(self) -> None:
        with pytest.raises(ValueError):
            attr_lens("name").set("x", {"name": "John"})
