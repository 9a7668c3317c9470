"""
Tests for the method model and naming rules
"""

import pytest

from java_binding_generator.model import Captured, Entity, Method, SelfBorrow, SelfOwned
from java_binding_generator.naming import to_camel_case, to_pascal_case


class TestNaming:
    """Test conversions between Rust and Java naming conventions"""

    @pytest.mark.parametrize("name,expected", [
        ("func", "func"),
        ("my_func_name", "myFuncName"),
        ("get_foo_bar", "getFooBar"),
        ("my_var", "myVar"),
        ("add_2_ints", "add2Ints"),
        ("alreadyCamel", "alreadyCamel"),
        ("_leading", "leading"),
    ])
    def test_camel_case(self, name, expected):
        assert to_camel_case(name) == expected

    @pytest.mark.parametrize("name,expected", [
        ("Primitive", "Primitive"),
        ("primitive", "Primitive"),
        ("my_entity", "MyEntity"),
        ("MyEntity", "MyEntity"),
        ("HTTPClient", "HTTPClient"),
        ("http_client", "HttpClient"),
    ])
    def test_pascal_case(self, name, expected):
        assert to_pascal_case(name) == expected


class TestMethod:
    """Test static detection and derived names"""

    def test_no_args_is_static(self):
        assert Method("foobar").is_static

    def test_captured_only_is_static(self):
        method = Method("foobar", "i32", [Captured("a", "i32"), Captured("b", "i16")])
        assert method.is_static

    @pytest.mark.parametrize("receiver", [
        SelfBorrow(mutable=False),
        SelfBorrow(mutable=True),
        SelfOwned(mutable=False),
        SelfOwned(mutable=True),
    ])
    def test_receiver_makes_instance_method(self, receiver):
        assert not Method("foobar", None, [receiver]).is_static
        assert not Method("foobar", "bool", [receiver, Captured("a", "i32")]).is_static

    def test_java_names(self):
        method = Method("get_foo_bar", None, [Captured("my_var", "String")])
        assert method.java_name == "getFooBar"
        assert method.captured_args[0].java_name == "myVar"

    def test_captured_args_skip_receiver(self):
        method = Method("f", None, [SelfBorrow(), Captured("a", "i32")])
        assert method.captured_args == [Captured("a", "i32")]

    def test_more_than_one_receiver_rejected(self):
        with pytest.raises(ValueError):
            Method("f", None, [SelfBorrow(), SelfOwned()])

    def test_receiver_after_captured_rejected(self):
        with pytest.raises(ValueError):
            Method("f", None, [Captured("a", "i32"), SelfOwned(mutable=True)])

    def test_args_keep_declaration_order(self):
        args = [Captured("b", "i32"), Captured("a", "i64")]
        assert [arg.name for arg in Method("f", None, args).args] == ["b", "a"]

    def test_unknown_variant_rejected(self):
        with pytest.raises(TypeError):
            Method("f", None, ["self"])


class TestEntity:
    def test_entity_is_immutable(self):
        entity = Entity("Entity", [Method("foo")])
        assert isinstance(entity.methods, tuple)
        with pytest.raises(AttributeError):
            entity.name = "Other"
