"""Literal input values, arguments and directives of GraphQL documents."""

from __future__ import annotations

import enum
import math
import re
from dataclasses import dataclass, field
from typing import Any, Mapping, Optional, Union


@dataclass(frozen=True, order=True)
class Location:
    """A position in a GraphQL document, counted from 1."""

    line: int = 0
    column: int = 0

    def before(self, other: "Location") -> bool:
        """Return True if this location comes strictly before ``other``."""
        return (self.line, self.column) < (other.line, other.column)


class QueryError(Exception):
    """An error found while parsing, validating or executing a query."""

    def __init__(
        self,
        message: str,
        locations: Optional[list[Location]] = None,
        rule: str = "",
        path: Optional[list[Any]] = None,
        resolver_error: Optional[BaseException] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.locations = list(locations) if locations else []
        self.rule = rule
        self.path = list(path) if path else []
        self.resolver_error = resolver_error

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return (
            f"QueryError(message={self.message!r}, locations={self.locations!r}, "
            f"rule={self.rule!r})"
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, QueryError):
            return NotImplemented
        return (self.message, self.locations, self.rule, self.path) == (
            other.message,
            other.locations,
            other.rule,
            other.path,
        )

    __hash__ = None  # type: ignore[assignment]


@dataclass(frozen=True)
class Ident:
    """A name together with where it appears."""

    name: str
    loc: Location = Location()


class TokenKind(enum.Enum):
    """Lexical kind of a primitive literal."""

    INT = "Int"
    FLOAT = "Float"
    STRING = "String"
    IDENT = "Ident"


_INT_LITERAL = re.compile(r"[+-]?[0-9]+")
_INT32_MIN = -(2**31)
_INT32_MAX = 2**31 - 1

# Keyword literals and the Python values they stand for.
_KEYWORD_VALUES: dict[str, Any] = {"true": True, "false": False, "null": None}

_SIMPLE_ESCAPES = {
    "a": "\a",
    "b": "\b",
    "f": "\f",
    "n": "\n",
    "r": "\r",
    "t": "\t",
    "v": "\v",
    "\\": "\\",
    "'": "'",
    '"': '"',
}

_ESCAPE = re.compile(
    r"\\(?:([abfnrtv\\'\"])|x([0-9A-Fa-f]{2})|u([0-9A-Fa-f]{4})"
    r"|U([0-9A-Fa-f]{8})|([0-7]{3}))|(\\)|(.)",
    re.DOTALL,
)


def _unquote(text: str) -> str:
    """Decode a double-quoted, single-quoted or back-quoted string literal."""
    if len(text) < 2 or text[0] != text[-1]:
        raise ValueError(f"invalid string literal {text!r}")
    quote, body = text[0], text[1:-1]
    if quote == "`":
        if "`" in body:
            raise ValueError(f"invalid string literal {text!r}")
        return body.replace("\r", "")
    if quote not in "\"'":
        raise ValueError(f"invalid string literal {text!r}")

    out = bytearray()
    for match in _ESCAPE.finditer(body):
        simple, hex2, u4, u8, octal, lone, char = match.groups()
        if lone is not None:
            raise ValueError(f"invalid escape in string literal {text!r}")
        if char is not None:
            if char == quote or char == "\n":
                raise ValueError(f"invalid string literal {text!r}")
            out += char.encode("utf-8")
        elif simple is not None:
            if simple in "'\"" and simple != quote:
                raise ValueError(f"invalid escape in string literal {text!r}")
            out += _SIMPLE_ESCAPES[simple].encode("utf-8")
        elif hex2 is not None or octal is not None:
            byte = int(hex2, 16) if hex2 is not None else int(octal, 8)
            if byte > 0xFF:
                raise ValueError(f"invalid escape in string literal {text!r}")
            out.append(byte)
        else:
            code_point = int(u4 if u4 is not None else u8, 16)
            if 0xD800 <= code_point < 0xE000 or code_point > 0x10FFFF:
                raise ValueError(f"invalid escape in string literal {text!r}")
            out += chr(code_point).encode("utf-8")

    result = out.decode("utf-8", errors="replace")
    if quote == "'" and len(result) != 1:
        raise ValueError(f"invalid character literal {text!r}")
    return result


@dataclass
class PrimitiveValue:
    """An Int, Float, String, Boolean or enum literal."""

    kind: TokenKind
    text: str
    loc: Location = Location()

    def deserialize(self, variables: Optional[Mapping[str, Any]] = None) -> Any:
        if self.kind is TokenKind.INT:
            if not _INT_LITERAL.fullmatch(self.text):
                raise ValueError(f"invalid Int literal {self.text!r}")
            number = int(self.text)
            if not _INT32_MIN <= number <= _INT32_MAX:
                raise ValueError(f"Int literal {self.text!r} is out of 32-bit range")
            return number
        if self.kind is TokenKind.FLOAT:
            if "_" in self.text:
                raise ValueError(f"invalid Float literal {self.text!r}")
            number = float(self.text)
            if math.isinf(number):
                raise ValueError(f"Float literal {self.text!r} is out of range")
            return number
        if self.kind is TokenKind.STRING:
            return _unquote(self.text)
        if self.kind is TokenKind.IDENT:
            if self.text in ("true", "false"):
                return _KEYWORD_VALUES[self.text]
            return self.text
        raise ValueError("invalid literal value")

    def __str__(self) -> str:
        return self.text


@dataclass
class ListValue:
    """A literal list."""

    values: list["Value"] = field(default_factory=list)
    loc: Location = Location()

    def deserialize(self, variables: Optional[Mapping[str, Any]] = None) -> list[Any]:
        return [entry.deserialize(variables) for entry in self.values]

    def __str__(self) -> str:
        return "[" + ", ".join(str(entry) for entry in self.values) + "]"


@dataclass
class ObjectField:
    """A name/value pair inside a literal object."""

    name: Ident
    value: "Value"


@dataclass
class ObjectValue:
    """A literal input object."""

    fields: list[ObjectField] = field(default_factory=list)
    loc: Location = Location()

    def deserialize(self, variables: Optional[Mapping[str, Any]] = None) -> dict[str, Any]:
        return {f.name.name: f.value.deserialize(variables) for f in self.fields}

    def __str__(self) -> str:
        return "{" + ", ".join(f"{f.name.name}: {f.value}" for f in self.fields) + "}"


@dataclass
class NullValue:
    """The literal ``null``."""

    loc: Location = Location()

    def deserialize(self, variables: Optional[Mapping[str, Any]] = None) -> Any:
        """Map the ``null`` keyword to its Python value; variables play no part."""
        return _KEYWORD_VALUES[str(self)]

    def __str__(self) -> str:
        return "null"


@dataclass
class Variable:
    """A reference to an operation variable."""

    name: str
    loc: Location = Location()

    def deserialize(self, variables: Optional[Mapping[str, Any]] = None) -> Any:
        if variables is None:
            return None
        return variables.get(self.name)

    def __str__(self) -> str:
        return "$" + self.name


Value = Union[PrimitiveValue, ListValue, ObjectValue, NullValue, Variable]


@dataclass
class Argument:
    """A named argument passed to a field or directive."""

    name: Ident
    value: Value


class ArgumentList(list):
    """An ordered collection of arguments."""

    def get(self, name: str) -> Optional[Value]:
        """Return the value of the argument called ``name``, or None."""
        return next((arg.value for arg in self if arg.name.name == name), None)

    def must_get(self, name: str) -> Value:
        """Return the value of the argument called ``name`` or raise KeyError."""
        value = self.get(name)
        if value is None:
            raise KeyError("argument not found")
        return value


@dataclass
class Directive:
    """A directive applied somewhere in a document."""

    name: Ident
    arguments: ArgumentList = field(default_factory=ArgumentList)


class DirectiveList(list):
    """An ordered collection of directives."""

    def get(self, name: str) -> Optional[Directive]:
        """Return the directive called ``name``, or None."""
        return next((d for d in self if d.name.name == name), None)