"""Type-system definitions and executable document nodes of GraphQL."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Optional

from gqlcore.values import DirectiveList, Ident, Location, Value


class _NamedTypeBase:
    """Behaviour shared by every named type definition."""

    name: str
    desc: str

    @property
    def type_name(self) -> str:
        return self.name

    @property
    def description(self) -> str:
        return self.desc

    def __str__(self) -> str:
        return self.name


@dataclass(eq=False)
class TypeName:
    """A reference to a named type that has not been resolved yet."""

    name: str
    loc: Location = Location()

    @property
    def kind(self) -> str:
        raise TypeError("TypeName needs to be resolved to actual type")

    def __str__(self) -> str:
        raise TypeError("TypeName needs to be resolved to actual type")


@dataclass(eq=False)
class ListType:
    """A list of values of an inner type, written ``[Inner]``."""

    of_type: "GraphQLType"
    kind = "LIST"

    def __str__(self) -> str:
        return "[" + str(self.of_type) + "]"


@dataclass(eq=False)
class NonNull:
    """A non-null wrapper of an inner type, written ``Inner!``."""

    of_type: "GraphQLType"
    kind = "NON_NULL"

    def __str__(self) -> str:
        return str(self.of_type) + "!"


@dataclass(eq=False)
class InputValueDefinition:
    """An argument or input field declaration."""

    name: Ident
    type: "GraphQLType"
    default: Optional[Value] = None
    desc: str = ""
    directives: DirectiveList = field(default_factory=DirectiveList)
    loc: Location = Location()
    type_loc: Location = Location()


class InputValueDefinitionList(list):
    """An ordered collection of input value declarations."""

    def get(self, name: str) -> Optional[InputValueDefinition]:
        """Return the declaration called ``name``, or None."""
        return next((v for v in self if v.name.name == name), None)


class ArgumentsDefinition(list):
    """The argument declarations of a field or directive."""

    def get(self, name: str) -> Optional[InputValueDefinition]:
        """Return the declaration called ``name``, or None."""
        return next((v for v in self if v.name.name == name), None)


@dataclass(eq=False)
class DirectiveDefinition:
    """A directive declared by a schema."""

    name: str
    desc: str = ""
    locations: list[str] = field(default_factory=list)
    arguments: ArgumentsDefinition = field(default_factory=ArgumentsDefinition)
    loc: Location = Location()


@dataclass(eq=False)
class FieldDefinition:
    """A field declared on an object or interface type."""

    name: str
    type: "GraphQLType" = None  # type: ignore[assignment]
    arguments: ArgumentsDefinition = field(default_factory=ArgumentsDefinition)
    directives: DirectiveList = field(default_factory=DirectiveList)
    desc: str = ""
    loc: Location = Location()


class FieldsDefinition(list):
    """The field declarations of an object or interface type."""

    def get(self, name: str) -> Optional[FieldDefinition]:
        """Return the field called ``name``, or None."""
        return next((f for f in self if f.name == name), None)

    def names(self) -> list[str]:
        """Return the names of all fields in order."""
        return [f.name for f in self]


@dataclass(eq=False)
class EnumValueDefinition:
    """One possible value of an enum type."""

    enum_value: str
    directives: DirectiveList = field(default_factory=DirectiveList)
    desc: str = ""
    loc: Location = Location()


@dataclass(eq=False)
class EnumTypeDefinition(_NamedTypeBase):
    """A leaf type whose values are a fixed set of names."""

    name: str
    enum_values_definition: list[EnumValueDefinition] = field(default_factory=list)
    desc: str = ""
    directives: DirectiveList = field(default_factory=DirectiveList)
    loc: Location = Location()
    kind = "ENUM"


@dataclass(eq=False)
class ScalarTypeDefinition(_NamedTypeBase):
    """A primitive leaf type such as Int or String."""

    name: str
    desc: str = ""
    directives: DirectiveList = field(default_factory=DirectiveList)
    loc: Location = Location()
    kind = "SCALAR"


@dataclass(eq=False)
class ObjectTypeDefinition(_NamedTypeBase):
    """An object type with named fields."""

    name: str
    interfaces: list["InterfaceTypeDefinition"] = field(default_factory=list)
    fields: FieldsDefinition = field(default_factory=FieldsDefinition)
    desc: str = ""
    directives: DirectiveList = field(default_factory=DirectiveList)
    interface_names: list[str] = field(default_factory=list)
    loc: Location = Location()
    kind = "OBJECT"


@dataclass(eq=False)
class InterfaceTypeDefinition(_NamedTypeBase):
    """A set of fields that implementing object types must provide."""

    name: str
    possible_types: list[ObjectTypeDefinition] = field(default_factory=list)
    fields: FieldsDefinition = field(default_factory=FieldsDefinition)
    desc: str = ""
    directives: DirectiveList = field(default_factory=DirectiveList)
    loc: Location = Location()
    kind = "INTERFACE"


@dataclass(eq=False)
class Union(_NamedTypeBase):
    """A type that is one of several object types."""

    name: str
    union_member_types: list[ObjectTypeDefinition] = field(default_factory=list)
    desc: str = ""
    directives: DirectiveList = field(default_factory=DirectiveList)
    type_names: list[str] = field(default_factory=list)
    loc: Location = Location()
    kind = "UNION"


@dataclass(eq=False)
class InputObject(_NamedTypeBase):
    """An input type made of named input fields."""

    name: str
    desc: str = ""
    values: ArgumentsDefinition = field(default_factory=ArgumentsDefinition)
    directives: DirectiveList = field(default_factory=DirectiveList)
    loc: Location = Location()
    kind = "INPUT_OBJECT"


@dataclass(eq=False)
class Extension:
    """An extension of a previously defined named type."""

    type: "NamedType"
    directives: DirectiveList = field(default_factory=DirectiveList)
    loc: Location = Location()


@dataclass(eq=False)
class Field:
    """A field selected in an operation."""

    alias: Ident
    name: Ident
    arguments: "ArgumentListType" = None  # type: ignore[assignment]
    directives: DirectiveList = field(default_factory=DirectiveList)
    selection_set: Optional[list["Selection"]] = None
    selection_set_loc: Location = Location()

    def __post_init__(self) -> None:
        if self.arguments is None:
            from gqlcore.values import ArgumentList

            self.arguments = ArgumentList()


@dataclass(eq=False)
class InlineFragment:
    """A fragment written in place inside a selection set."""

    on: TypeName = field(default_factory=lambda: TypeName(""))
    selections: list["Selection"] = field(default_factory=list)
    directives: DirectiveList = field(default_factory=DirectiveList)
    loc: Location = Location()


@dataclass(eq=False)
class FragmentDefinition:
    """A named fragment defined at document level."""

    name: Ident
    on: TypeName
    selections: list["Selection"] = field(default_factory=list)
    directives: DirectiveList = field(default_factory=DirectiveList)
    loc: Location = Location()


@dataclass(eq=False)
class FragmentSpread:
    """A use of a named fragment inside a selection set."""

    name: Ident
    directives: DirectiveList = field(default_factory=DirectiveList)
    loc: Location = Location()


class FragmentList(list):
    """The fragment definitions of a document."""

    def get(self, name: str) -> Optional[FragmentDefinition]:
        """Return the fragment called ``name``, or None."""
        return next((f for f in self if f.name.name == name), None)


class OperationType(str, enum.Enum):
    """The kind of an operation."""

    QUERY = "QUERY"
    MUTATION = "MUTATION"
    SUBSCRIPTION = "SUBSCRIPTION"

    def __str__(self) -> str:
        return self.value


@dataclass(eq=False)
class OperationDefinition:
    """A query, mutation or subscription in a document."""

    type: OperationType
    name: Ident = field(default_factory=lambda: Ident(""))
    vars: ArgumentsDefinition = field(default_factory=ArgumentsDefinition)
    selections: list["Selection"] = field(default_factory=list)
    directives: DirectiveList = field(default_factory=DirectiveList)
    loc: Location = Location()


class OperationList(list):
    """The operations of a document."""

    def get(self, name: str) -> Optional[OperationDefinition]:
        """Return the operation called ``name``, or None."""
        return next((op for op in self if op.name.name == name), None)


@dataclass(eq=False)
class ExecutableDefinition:
    """A parsed document: its operations and fragments."""

    operations: OperationList = field(default_factory=OperationList)
    fragments: FragmentList = field(default_factory=FragmentList)


@dataclass(eq=False)
class Schema:
    """The types, directives and root operation types of a service."""

    entry_points: dict[str, "NamedType"] = field(default_factory=dict)
    types: dict[str, "NamedType"] = field(default_factory=dict)
    directives: dict[str, DirectiveDefinition] = field(default_factory=dict)
    use_field_resolvers: bool = False
    entry_point_names: dict[str, str] = field(default_factory=dict)
    objects: list[ObjectTypeDefinition] = field(default_factory=list)
    unions: list[Union] = field(default_factory=list)
    enums: list[EnumTypeDefinition] = field(default_factory=list)
    extensions: list[Extension] = field(default_factory=list)

    def resolve(self, name: str) -> Optional["NamedType"]:
        """Return the named type called ``name``, or None."""
        return self.types.get(name)


NamedType = (
    ScalarTypeDefinition
    | ObjectTypeDefinition
    | InterfaceTypeDefinition
    | Union
    | EnumTypeDefinition
    | InputObject
)
GraphQLType = NamedType | ListType | NonNull | TypeName
Selection = Field | InlineFragment | FragmentSpread
NAMED_TYPES = (
    ScalarTypeDefinition,
    ObjectTypeDefinition,
    InterfaceTypeDefinition,
    Union,
    EnumTypeDefinition,
    InputObject,
)