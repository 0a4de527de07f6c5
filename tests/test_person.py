from dataclasses import dataclass

import pytest

from academia.person import Person


@dataclass
class _Visitor(Person):
    def describe(self):
        return f"{self.code}: {self.name}"


@dataclass
class _Guest(Person):
    def describe(self):
        return self.name

    def kind(self):
        return "Invitado"


def test_person_is_abstract():
    with pytest.raises(TypeError):
        Person("00001", "Ana")


def test_subclass_without_describe_is_abstract():
    class Incomplete(Person):
        pass

    with pytest.raises(TypeError):
        Incomplete()
    assert getattr(Person.describe, "__isabstractmethod__", False) is True
    assert Person.kind(_Visitor("00003", "Eva")) == "Persona"


def test_default_kind():
    assert Person.kind(_Visitor("00001", "Ana")) == "Persona"


def test_kind_can_be_overridden():
    guest = _Guest("00002", "Luis")
    assert guest.kind() == "Invitado"
    assert Person.kind(guest) == "Persona"


def test_fields_and_defaults():
    empty = _Visitor()
    assert (empty.code, empty.name) == ("", "")
    assert Person.kind(empty) == "Persona"
    person = _Visitor("12345", "Ana Torres")
    person.name = "Ana Ruiz"
    assert person.describe() == "12345: Ana Ruiz"