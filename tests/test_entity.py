"""
Entity Tests

Records, @method capabilities, behavior tables and detaching.
"""

import pytest
from pydantic import ValidationError

from boundmodel import (
    Entity, EntityConfig, method, detach,
    ContextFunction, LexicalFunction, BoundFunction,
    BindingError, UnboundContextError, CapabilityNotFoundError,
)


class Note(Entity):
    text: str

    @method
    def get_text(this):
        return this.text

    @method(lexical=True)
    def get_text_arrow(this):
        return this.text


class LooseNote(Entity):
    model_config = EntityConfig(strict_context=False)
    text: str

    @method
    def get_text(this):
        return this.text


class Dog(Entity):
    name: str


@Dog.prototype.define
def get_name(this):
    return this.name


@Dog.prototype.define(name="describe")
def _describe(this, suffix=""):
    return f"{this.name} the dog{suffix}"



class Parrot(Entity):
    model_config = EntityConfig(strict_context=False)
    name: str


@Parrot.prototype.define
def speak(this):
    return this.name


@Parrot.prototype.define(strict=True)
def shout(this):
    return this.name.upper()

class TestEntity:
    """Record construction and method-call form"""

    def test_records_are_immutable(self):
        note = Note(text="fixed")
        with pytest.raises(ValidationError):
            note.text = "changed"

    def test_method_call_form_binds_the_record(self):
        note = Note(text="hello")
        assert isinstance(note.get_text, BoundFunction)
        assert note.get_text() == "hello"

    def test_class_access_returns_unbound_function(self):
        assert isinstance(Note.get_text, ContextFunction)
        assert Note.get_text.call(Note(text="explicit")) == "explicit"

    def test_arrow_method_never_sees_the_record(self):
        note = Note(text="hello")
        assert isinstance(note.get_text_arrow, LexicalFunction)
        with pytest.raises(UnboundContextError):
            note.get_text_arrow()

    def test_strict_context_setting_applies_to_methods(self):
        assert Note.get_text.strict is True
        assert LooseNote.get_text.strict is False
        assert LooseNote.get_text() is None

    def test_capabilities_lists_methods_and_prototype_entries(self):
        assert Note.capabilities() == ["get_text", "get_text_arrow"]
        assert Dog.capabilities() == ["describe", "get_name"]

    def test_each_class_has_its_own_prototype(self):
        assert "get_name" in Dog.prototype
        assert "get_name" not in Note.prototype
        assert len(Dog.prototype) == 2
        assert Dog.prototype.names() == ["get_name", "describe"]


class TestBehaviorTable:
    """Shared implementation, context supplied per instance"""

    def test_define_returns_the_original_function(self):
        assert get_name(Dog(name="Rex")) == "Rex"

    def test_instances_share_one_implementation(self):
        rex, fido = Dog(name="Rex"), Dog(name="Fido")
        assert rex.get_name() == "Rex"
        assert fido.get_name() == "Fido"
        assert rex.get_name.function is fido.get_name.function is Dog.prototype["get_name"]

    def test_define_under_custom_name(self):
        assert Dog(name="Rex").describe("!") == "Rex the dog!"

    def test_setitem_accepts_plain_functions(self):
        class Cat(Entity):
            name: str

        Cat.prototype["shout"] = lambda this: this.name.upper()
        assert Cat(name="tom").shout() == "TOM"
        assert list(Cat.prototype) == ["shout"]

    def test_entries_inherit_the_record_strictness(self):
        assert Dog.prototype["get_name"].strict is True
        assert Parrot.prototype["speak"].strict is False
        assert detach(Parrot(name="Polly"), "speak")() is None

    def test_define_overrides_the_record_strictness(self):
        assert Parrot.prototype["shout"].strict is True
        with pytest.raises(UnboundContextError):
            detach(Parrot(name="Polly"), "shout")()
        assert Parrot(name="Polly").shout() == "POLLY"

    def test_capability_cannot_shadow_a_field(self):
        with pytest.raises(BindingError):
            Dog.prototype["name"] = lambda this: "shadow"


class TestDetach:
    """Extracting capabilities from records"""

    def test_detached_capability_loses_its_context(self):
        getter = detach(Dog(name="Rex"), "get_name")
        with pytest.raises(UnboundContextError):
            getter()

    @pytest.mark.parametrize("name", ["Fluffy", "Rex", "", "Ünïcode"])
    def test_bound_detached_capability_matches_attached_call(self, name):
        dog = Dog(name=name)
        getter = detach(dog, "get_name", bound=True)
        assert getter() == dog.get_name() == name

    def test_detach_class_method(self):
        note = Note(text="from class")
        assert detach(note, "get_text", bound=True)() == "from class"

    def test_detach_field_returns_value(self):
        assert detach(Dog(name="Rex"), "name") == "Rex"

    def test_detach_unknown_capability_raises(self):
        with pytest.raises(CapabilityNotFoundError, match="missing"):
            detach(Dog(name="Rex"), "missing")

    def test_detach_follows_subclass_override(self):
        class PlainNote(Note):
            def get_text(self):
                return "override"

        note = PlainNote(text="base")
        assert note.get_text() == "override"
        assert detach(note, "get_text", bound=True)() == "override"
        assert detach(note, "get_text")() == "override"
        assert PlainNote.capabilities() == ["get_text_arrow"]

    def test_subclass_inherits_capabilities(self):
        class Puppy(Dog):
            pass

        puppy = Puppy(name="Bit")
        assert puppy.get_name() == "Bit"
        assert detach(puppy, "get_name", bound=True)() == "Bit"
