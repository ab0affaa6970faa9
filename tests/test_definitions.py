import pytest

from gqlcore.definitions import (
    ArgumentsDefinition,
    EnumTypeDefinition,
    EnumValueDefinition,
    ExecutableDefinition,
    Field,
    FieldDefinition,
    FieldsDefinition,
    FragmentDefinition,
    FragmentList,
    InputObject,
    InputValueDefinition,
    InputValueDefinitionList,
    InterfaceTypeDefinition,
    ListType,
    NonNull,
    ObjectTypeDefinition,
    OperationDefinition,
    OperationList,
    OperationType,
    ScalarTypeDefinition,
    Schema,
    TypeName,
    Union,
)
from gqlcore.values import ArgumentList, Ident


@pytest.fixture
def int_type():
    return ScalarTypeDefinition("Int", desc="whole numbers")


def test_kinds_of_named_types(int_type):
    assert int_type.kind == "SCALAR"
    assert ObjectTypeDefinition("Q").kind == "OBJECT"
    assert InterfaceTypeDefinition("I").kind == "INTERFACE"
    assert Union("U").kind == "UNION"
    assert EnumTypeDefinition("E").kind == "ENUM"
    assert InputObject("In").kind == "INPUT_OBJECT"


def test_wrapper_kinds_and_strings(int_type):
    wrapped = NonNull(ListType(NonNull(int_type)))
    assert wrapped.kind == "NON_NULL"
    assert wrapped.of_type.kind == "LIST"
    assert str(wrapped) == "[Int!]!"


def test_named_type_accessors(int_type):
    assert str(int_type) == "Int"
    assert int_type.type_name == "Int"
    assert int_type.description == "whole numbers"


def test_type_name_must_be_resolved():
    ref = TypeName("Foo")
    with pytest.raises(TypeError, match="resolved"):
        _ = ref.kind
    with pytest.raises(TypeError, match="resolved"):
        str(ref)

    resolved = Schema(types={"Foo": ScalarTypeDefinition("Foo")}).resolve("Foo")
    assert resolved.kind == "SCALAR"
    assert str(resolved) == "Foo"


def test_fields_definition_get_and_names(int_type):
    fields = FieldsDefinition([FieldDefinition("a", int_type), FieldDefinition("b", int_type)])
    assert fields.get("b") is fields[1]
    assert fields.get("c") is None
    assert fields.names() == ["a", "b"]


@pytest.mark.parametrize("cls", [ArgumentsDefinition, InputValueDefinitionList])
def test_input_value_lists_get(cls, int_type):
    first = InputValueDefinition(Ident("x"), int_type)
    second = InputValueDefinition(Ident("y"), NonNull(int_type))
    values = cls([first, second])
    assert values.get("y") is second
    assert values.get("z") is None


def test_fragment_and_operation_lookup():
    frag = FragmentDefinition(Ident("friend"), TypeName("Character"))
    op = OperationDefinition(OperationType.QUERY, Ident("Hero"))
    doc = ExecutableDefinition(OperationList([op]), FragmentList([frag]))
    assert doc.fragments.get("friend") is frag
    assert doc.fragments.get("other") is None
    assert doc.operations.get("Hero") is op
    assert doc.operations.get("Villain") is None


def test_anonymous_operation_found_by_empty_name():
    op = OperationDefinition(OperationType.MUTATION)
    assert OperationList([op]).get("") is op


def test_operation_type_round_trip():
    for kind in OperationType:
        assert OperationType(kind.value) is kind
        assert str(kind) == kind.value


def test_schema_resolve(int_type):
    schema = Schema(types={"Int": int_type})
    assert schema.resolve("Int") is int_type
    assert schema.resolve("Missing") is None


def test_query_field_defaults():
    sel = Field(Ident("a"), Ident("b"))
    assert sel.selection_set is None
    assert isinstance(sel.arguments, ArgumentList) and len(sel.arguments) == 0


def test_definitions_compare_by_identity():
    a = EnumTypeDefinition("E", [EnumValueDefinition("X")])
    b = EnumTypeDefinition("E", [EnumValueDefinition("X")])
    assert a != b
    assert len({a, b}) == 2