# gqlcore

Building blocks for a GraphQL server written in plain Python: an in-memory
model of the GraphQL type system and of executable documents, the type
predicates that query checking relies on, read-only introspection views,
Relay-style global IDs, tracing hooks and input scalars that tell an
explicit `null` apart from an omitted value. It has no dependencies outside
the standard library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

- `gqlcore.values`: literal input values (`PrimitiveValue` with its
  `TokenKind`, `ListValue`, `ObjectValue`, `NullValue`, `Variable`), each
  with `deserialize(variables)` and a `str()` in GraphQL literal syntax;
  `Argument`/`ArgumentList` (`get`, `must_get`), `Directive`/`DirectiveList`
  (`get`), `Ident`, source `Location`s (`before`) and the `QueryError`
  exception with `message`, `locations`, `rule` and `path`.
- `gqlcore.definitions`: type-system definitions (`ScalarTypeDefinition`,
  `ObjectTypeDefinition`, `InterfaceTypeDefinition`, `Union`,
  `EnumTypeDefinition`, `InputObject`, the wrappers `ListType` and `NonNull`,
  and the unresolved reference `TypeName`), `FieldDefinition`,
  `InputValueDefinition`, `DirectiveDefinition`, `Extension`, document nodes
  (`OperationDefinition`, `OperationType`, `Field`, `InlineFragment`,
  `FragmentDefinition`, `FragmentSpread`, `ExecutableDefinition`) and
  `Schema` with `resolve(name)`. Named types expose `kind`, `type_name` and
  `description`; `str()` of a type gives its GraphQL notation such as
  `[Character]!`.
- `gqlcore.typecheck`: helpers on those types — `resolve_type`,
  `unwrap_type`, `can_be_fragment`, `can_be_input`, `has_subfields`,
  `is_leaf`, `is_null`, `types_compatible`, `type_can_be_used_as`,
  `validate_basic_lit`, `possible_types`, `compatible`, `fields_of` and
  `arguments_conflict`. `resolve_type` raises `QueryError` for an unknown
  type name.
- `gqlcore.suggestion`: `levenshtein_distance` and `make_suggestion`, which
  builds "Did you mean ...?" hints from the closest options.
- `gqlcore.introspection`: `Schema`, `Type`, `Field`, `InputValue`,
  `EnumValue` and `Directive` views that present a `definitions.Schema` the
  way the `__schema` and `__type` fields do. Types and directives are listed
  sorted by name; `Type.fields(include_deprecated)` and
  `Type.enum_values(include_deprecated)` leave out `@deprecated` entries
  unless asked, and return `None` for kinds that have none.
- `gqlcore.nullable`: the `Time` scalar (from a `datetime`, RFC 3339 text or
  bytes, or Unix seconds; `to_json()` gives an RFC 3339 JSON string) and
  `NullString`, `NullBool`, `NullInt`, `NullFloat`, `NullTime`, whose `set`
  becomes `True` once a value, even `null`, is given. Wrong input types raise
  `TypeError`; out-of-range or malformed values raise `ValueError`.
- `gqlcore.relay`: `marshal_id(kind, spec)` encodes a kind and a JSON value
  as URL-safe base64; `unmarshal_kind` returns the kind or `""` for a
  malformed ID; `unmarshal_spec` returns the decoded value or raises
  `ValueError`.
- `gqlcore.tracing`: the `Tracer` protocol, `NoopTracer`,
  `NoopValidationTracer` (their finish callbacks record nothing beyond a
  debug log line) and `DefaultLogger`, whose `log_panic` writes the value,
  the current stack and the context to the `gqlcore` logger.

## Examples

Telling `null` from a missing value:

```python
from gqlcore.nullable import NullInt

n = NullInt()
n.unmarshal_graphql(None)
assert n.set and n.value is None

n = NullInt()
n.unmarshal_graphql(42.0)
assert n.value == 42
```

Relay global IDs:

```python
from gqlcore.relay import marshal_id, unmarshal_kind, unmarshal_spec

gid = marshal_id("Human", 1000)
assert unmarshal_kind(gid) == "Human"
assert unmarshal_spec(gid) == 1000
```

Spelling suggestions:

```python
from gqlcore.suggestion import make_suggestion

make_suggestion("Did you mean", ["name", "friends"], "nam")
# ' Did you mean "name"?'
```

Type notation and checks:

```python
from gqlcore.definitions import ListType, NonNull, ScalarTypeDefinition
from gqlcore.typecheck import can_be_input, type_can_be_used_as

string = ScalarTypeDefinition("String")
required_list = NonNull(ListType(string))
assert str(required_list) == "[String]!"
assert can_be_input(required_list)
assert type_can_be_used_as(required_list, ListType(string))
assert not type_can_be_used_as(ListType(string), required_list)
```

## What this package does not do

- It does not parse GraphQL text: schemas and documents are built directly
  from the classes in `gqlcore.definitions` and `gqlcore.values`.
- It does not validate whole documents against a schema; it supplies the
  type predicates and suggestion helpers for such checks, not the rule set.
- It does not execute queries, mutations or subscriptions, and has no HTTP
  handler or server.
- It does not produce the introspection JSON document of a schema; the
  `gqlcore.introspection` views are read from Python.