"""Predicates and helpers on schema types used by query validation."""

from __future__ import annotations

import math
from typing import Any, Callable, Optional

from gqlcore import definitions as defs
from gqlcore.values import ArgumentList, NullValue, PrimitiveValue, QueryError, TokenKind

_INT32_MIN = -(2**31)
_INT32_MAX = 2**31 - 1


def resolve_type(
    t: defs.GraphQLType, resolve: Callable[[str], Optional[defs.NamedType]]
) -> defs.GraphQLType:
    """Replace every type-name reference in ``t`` with the type it names.

    Raises QueryError when a name is not known to ``resolve``.
    """
    if isinstance(t, defs.TypeName):
        resolved = resolve(t.name)
        if resolved is None:
            raise QueryError(f'Unknown type "{t.name}".', [t.loc], rule="KnownTypeNames")
        return resolved
    if isinstance(t, defs.ListType):
        return defs.ListType(resolve_type(t.of_type, resolve))
    if isinstance(t, defs.NonNull):
        return defs.NonNull(resolve_type(t.of_type, resolve))
    return t


def unwrap_type(t: Optional[defs.GraphQLType]) -> Optional[defs.NamedType]:
    """Strip list and non-null wrappers and return the named type inside."""
    while t is not None:
        if isinstance(t, defs.NAMED_TYPES):
            return t
        if isinstance(t, (defs.ListType, defs.NonNull)):
            t = t.of_type
        else:
            raise TypeError(f"cannot unwrap {type(t).__name__}")
    return None


def can_be_fragment(t: Any) -> bool:
    """Whether a fragment may condition on ``t``."""
    return isinstance(
        t, (defs.ObjectTypeDefinition, defs.InterfaceTypeDefinition, defs.Union)
    )


def can_be_input(t: Any) -> bool:
    """Whether ``t`` may be the type of a variable or argument."""
    if isinstance(t, (defs.InputObject, defs.ScalarTypeDefinition, defs.EnumTypeDefinition)):
        return True
    if isinstance(t, (defs.ListType, defs.NonNull)):
        return can_be_input(t.of_type)
    return False


def has_subfields(t: Any) -> bool:
    """Whether a field of type ``t`` needs a selection of subfields."""
    if isinstance(t, (defs.ObjectTypeDefinition, defs.InterfaceTypeDefinition, defs.Union)):
        return True
    if isinstance(t, (defs.ListType, defs.NonNull)):
        return has_subfields(t.of_type)
    return False


def is_leaf(t: Any) -> bool:
    """Whether ``t`` is a scalar or enum type."""
    return isinstance(t, (defs.ScalarTypeDefinition, defs.EnumTypeDefinition))


def is_null(value: Any) -> bool:
    """Whether ``value`` is the literal null."""
    return isinstance(value, NullValue)


def types_compatible(a: Any, b: Any) -> bool:
    """Whether two field types may be merged under one response name."""
    a_list, b_list = isinstance(a, defs.ListType), isinstance(b, defs.ListType)
    if a_list or b_list:
        return a_list and b_list and types_compatible(a.of_type, b.of_type)

    a_nn, b_nn = isinstance(a, defs.NonNull), isinstance(b, defs.NonNull)
    if a_nn or b_nn:
        return a_nn and b_nn and types_compatible(a.of_type, b.of_type)

    if is_leaf(a) or is_leaf(b):
        return a is b
    return True


def type_can_be_used_as(t: Any, as_: Any) -> bool:
    """Whether a variable of type ``t`` may be used where ``as_`` is expected."""
    t_nn = isinstance(t, defs.NonNull)
    if t_nn:
        t = t.of_type
    if isinstance(as_, defs.NonNull):
        as_ = as_.of_type
        if not t_nn:
            return False

    if t is as_:
        return True
    if isinstance(t, defs.ListType) and isinstance(as_, defs.ListType):
        return type_can_be_used_as(t.of_type, as_.of_type)
    return False


def validate_basic_lit(value: PrimitiveValue, t: Any) -> bool:
    """Whether a primitive literal is a valid value of a scalar or enum type."""
    if isinstance(t, defs.ScalarTypeDefinition):
        if t.name == "Int":
            if value.kind is not TokenKind.INT:
                return False
            number = float(value.text)
            return _INT32_MIN <= number <= _INT32_MAX
        if t.name == "Float":
            return value.kind in (TokenKind.INT, TokenKind.FLOAT)
        if t.name == "String":
            return value.kind is TokenKind.STRING
        if t.name == "Boolean":
            return value.kind is TokenKind.IDENT and value.text in ("true", "false")
        if t.name == "ID":
            return value.kind in (TokenKind.INT, TokenKind.STRING)
        return True

    if isinstance(t, defs.EnumTypeDefinition):
        if value.kind is not TokenKind.IDENT:
            return False
        return any(option.enum_value == value.text for option in t.enum_values_definition)

    return False


def possible_types(t: Any) -> list[defs.ObjectTypeDefinition]:
    """The object types a value of type ``t`` may have."""
    if isinstance(t, defs.ObjectTypeDefinition):
        return [t]
    if isinstance(t, defs.InterfaceTypeDefinition):
        return list(t.possible_types)
    if isinstance(t, defs.Union):
        return list(t.union_member_types)
    return []


def compatible(a: Any, b: Any) -> bool:
    """Whether some object type is possible for both ``a`` and ``b``."""
    b_types = possible_types(b)
    return any(pa is pb for pa in possible_types(a) for pb in b_types)


def fields_of(t: Any) -> defs.FieldsDefinition:
    """The fields of an object or interface type; empty for any other type."""
    if isinstance(t, (defs.ObjectTypeDefinition, defs.InterfaceTypeDefinition)):
        return t.fields
    return defs.FieldsDefinition()


def _deep_equal(a: Any, b: Any) -> bool:
    if type(a) is not type(b):
        return False
    if isinstance(a, list):
        return len(a) == len(b) and all(_deep_equal(x, y) for x, y in zip(a, b))
    if isinstance(a, dict):
        return a.keys() == b.keys() and all(_deep_equal(a[k], b[k]) for k in a)
    if isinstance(a, float) and math.isnan(a):
        return False
    return a == b


def arguments_conflict(a: ArgumentList, b: ArgumentList) -> bool:
    """Whether two argument lists differ in names or literal values."""
    if len(a) != len(b):
        return True
    for arg in a:
        other = b.get(arg.name.name)
        if other is None:
            return True
        if not _deep_equal(arg.value.deserialize(None), other.deserialize(None)):
            return True
    return False