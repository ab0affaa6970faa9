"""GraphQL type-system model, type checks, introspection views, Relay IDs and nullable scalars."""

__version__ = "0.1.0"

__all__ = [
    "definitions",
    "introspection",
    "nullable",
    "relay",
    "suggestion",
    "tracing",
    "typecheck",
    "values",
]