"""Maps declared field and parameter types to target-language type names.

One TypeResolver instance describes one target: a table of scalar type names
plus the way arrays are spelled. The dispatch covers the closed set of
FieldType/ParamType members; anything else raises UnsupportedTypeError,
which validation makes unreachable.
"""

from napiway.errors import UnsupportedTypeError
from napiway.naming import exported_name
from napiway.spec.base import Field, FieldType, Param, ParamType


class TypeResolver:
    """Per-target type naming strategy."""

    def __init__(self, language: str, scalars: dict[str, str], array_prefix: str, array_suffix: str = ""):
        self.language = language
        self.scalars = scalars
        self.array_prefix = array_prefix
        self.array_suffix = array_suffix

    def array_of(self, elem_type: str) -> str:
        return f"{self.array_prefix}{elem_type}{self.array_suffix}"

    def element_type(self, array_type: str) -> str:
        """Strip the array wrapper: "[]Foo" -> "Foo", "Array<Foo>" -> "Foo"."""
        elem = array_type[len(self.array_prefix):] if array_type.startswith(self.array_prefix) else array_type
        if self.array_suffix and elem.endswith(self.array_suffix):
            elem = elem[: -len(self.array_suffix)]
        return elem

    def resolve_field_type(self, field: Field, context_name: str) -> tuple[str, bool]:
        """Return (target type, needs recursive validation) for a field.

        Objects are named after ``context_name``; array elements get
        ``context_name + "Item"``.
        """
        field_type = _field_type(field.type)
        if field_type is FieldType.STRING:
            return self.scalars["string"], False
        if field_type is FieldType.NUMBER:
            return self.scalars["number"], False
        if field_type is FieldType.BOOLEAN:
            return self.scalars["boolean"], False
        if field_type is FieldType.OBJECT:
            return exported_name(context_name), True
        if field_type is FieldType.ARRAY:
            if field.items is None:
                raise UnsupportedTypeError("field", "array without items")
            elem_type, recurse = self.resolve_field_type(field.items, context_name + "Item")
            return self.array_of(elem_type), recurse
        raise UnsupportedTypeError("field", field.type)

    def resolve_param_type(self, param: Param) -> str:
        try:
            param_type = ParamType(param.type)
        except ValueError:
            raise UnsupportedTypeError("param", param.type) from None
        return self.scalars[param_type.value]

    def __repr__(self) -> str:
        return f"TypeResolver({self.language!r})"


def _field_type(tag: str) -> FieldType:
    try:
        return FieldType(tag)
    except ValueError:
        raise UnsupportedTypeError("field", tag) from None


GO_RESOLVER = TypeResolver(
    "go",
    {"string": "string", "number": "float64", "boolean": "bool"},
    array_prefix="[]",
)

TS_RESOLVER = TypeResolver(
    "typescript",
    {"string": "string", "number": "number", "boolean": "boolean"},
    array_prefix="Array<",
    array_suffix=">",
)

_TARGET_RESOLVERS = {
    "goServer": GO_RESOLVER,
    "goSdk": GO_RESOLVER,
    "tsSdk": TS_RESOLVER,
}


def resolver_for_target(target: str) -> TypeResolver:
    """Return the resolver for a config target block name (goServer, goSdk, tsSdk)."""
    try:
        return _TARGET_RESOLVERS[target]
    except KeyError:
        raise ValueError(f"unknown generation target: {target}") from None
