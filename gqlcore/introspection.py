"""Read-only views of a schema in the shape of the GraphQL introspection types."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from gqlcore import definitions as defs
from gqlcore.values import DirectiveList


def _deprecation_reason(directives: DirectiveList) -> Optional[str]:
    directive = directives.get("deprecated")
    if directive is None:
        return None
    return directive.arguments.must_get("reason").deserialize(None)


def _optional(text: str) -> Optional[str]:
    return text or None


@dataclass(frozen=True)
class Schema:
    """The ``__Schema`` view of a schema."""

    schema: defs.Schema

    @property
    def types(self) -> list["Type"]:
        """All named types, sorted by name."""
        return [Type(self.schema.types[name]) for name in sorted(self.schema.types)]

    @property
    def directives(self) -> list["Directive"]:
        """All directive definitions, sorted by name."""
        return [
            Directive(self.schema.directives[name])
            for name in sorted(self.schema.directives)
        ]

    def _root(self, operation: str) -> Optional["Type"]:
        type_name = self.schema.entry_point_names.get(operation)
        if type_name is None:
            return None
        typ = self.schema.types.get(type_name)
        return None if typ is None else Type(typ)

    @property
    def query_type(self) -> Optional["Type"]:
        return self._root("query")

    @property
    def mutation_type(self) -> Optional["Type"]:
        return self._root("mutation")

    @property
    def subscription_type(self) -> Optional["Type"]:
        return self._root("subscription")


@dataclass(frozen=True)
class Type:
    """The ``__Type`` view of a named or wrapping type."""

    typ: defs.GraphQLType

    @property
    def kind(self) -> str:
        return self.typ.kind

    @property
    def name(self) -> Optional[str]:
        if isinstance(self.typ, defs.NAMED_TYPES):
            return self.typ.type_name
        return None

    @property
    def description(self) -> Optional[str]:
        if isinstance(self.typ, defs.NAMED_TYPES):
            return _optional(self.typ.description)
        return None

    def fields(self, include_deprecated: bool = False) -> Optional[list["Field"]]:
        """Fields of an object or interface type; None for other kinds."""
        if not isinstance(self.typ, (defs.ObjectTypeDefinition, defs.InterfaceTypeDefinition)):
            return None
        return [
            Field(f)
            for f in self.typ.fields
            if include_deprecated or f.directives.get("deprecated") is None
        ]

    @property
    def interfaces(self) -> Optional[list["Type"]]:
        if not isinstance(self.typ, defs.ObjectTypeDefinition):
            return None
        return [Type(intf) for intf in self.typ.interfaces]

    @property
    def possible_types(self) -> Optional[list["Type"]]:
        if isinstance(self.typ, defs.InterfaceTypeDefinition):
            members = self.typ.possible_types
        elif isinstance(self.typ, defs.Union):
            members = self.typ.union_member_types
        else:
            return None
        return [Type(member) for member in members]

    def enum_values(self, include_deprecated: bool = False) -> Optional[list["EnumValue"]]:
        """Values of an enum type; None for other kinds."""
        if not isinstance(self.typ, defs.EnumTypeDefinition):
            return None
        return [
            EnumValue(v)
            for v in self.typ.enum_values_definition
            if include_deprecated or v.directives.get("deprecated") is None
        ]

    @property
    def input_fields(self) -> Optional[list["InputValue"]]:
        if not isinstance(self.typ, defs.InputObject):
            return None
        return [InputValue(v) for v in self.typ.values]

    @property
    def of_type(self) -> Optional["Type"]:
        if isinstance(self.typ, (defs.ListType, defs.NonNull)):
            return Type(self.typ.of_type)
        return None


@dataclass(frozen=True)
class Field:
    """The ``__Field`` view of a field definition."""

    field: defs.FieldDefinition

    @property
    def name(self) -> str:
        return self.field.name

    @property
    def description(self) -> Optional[str]:
        return _optional(self.field.desc)

    @property
    def args(self) -> list["InputValue"]:
        return [InputValue(v) for v in self.field.arguments]

    @property
    def type(self) -> Type:
        return Type(self.field.type)

    @property
    def is_deprecated(self) -> bool:
        return self.field.directives.get("deprecated") is not None

    @property
    def deprecation_reason(self) -> Optional[str]:
        return _deprecation_reason(self.field.directives)


@dataclass(frozen=True)
class InputValue:
    """The ``__InputValue`` view of an argument or input field."""

    value: defs.InputValueDefinition

    @property
    def name(self) -> str:
        return self.value.name.name

    @property
    def description(self) -> Optional[str]:
        return _optional(self.value.desc)

    @property
    def type(self) -> Type:
        return Type(self.value.type)

    @property
    def default_value(self) -> Optional[str]:
        if self.value.default is None:
            return None
        return str(self.value.default)


@dataclass(frozen=True)
class EnumValue:
    """The ``__EnumValue`` view of an enum value definition."""

    value: defs.EnumValueDefinition

    @property
    def name(self) -> str:
        return self.value.enum_value

    @property
    def description(self) -> Optional[str]:
        return _optional(self.value.desc)

    @property
    def is_deprecated(self) -> bool:
        return self.value.directives.get("deprecated") is not None

    @property
    def deprecation_reason(self) -> Optional[str]:
        return _deprecation_reason(self.value.directives)


@dataclass(frozen=True)
class Directive:
    """The ``__Directive`` view of a directive definition."""

    directive: defs.DirectiveDefinition

    @property
    def name(self) -> str:
        return self.directive.name

    @property
    def description(self) -> Optional[str]:
        return _optional(self.directive.desc)

    @property
    def locations(self) -> list[str]:
        return self.directive.locations

    @property
    def args(self) -> list[InputValue]:
        return [InputValue(v) for v in self.directive.arguments]