"""Flattens nested object/array field trees into named type definitions.

A type is named after its full ancestor path: the ``User`` property of
``CreateUserRequestBody`` becomes ``CreateUserRequestBodyUser`` and the
object elements of its ``Roles`` array become
``CreateUserRequestBodyUserRolesItem``. Sibling property names are unique
map keys; concatenation can still collide across levels (``A.B`` and ``AB``),
which the assembler rejects.
"""

from napiway.ir.models import FieldDef, TypeDef
from napiway.ir.resolver import TypeResolver
from napiway.log import get_logger
from napiway.naming import exported_name
from napiway.spec.base import Field, FieldType, HTTPBody

logger = get_logger(__name__)


def flatten(parent_name: str, field_label: str, field: Field, resolver: TypeResolver) -> list[TypeDef]:
    """Return the type definitions for ``field`` and everything nested in it.

    Only object fields produce a TypeDef. Nested types come before their
    container (post-order). Callers sort the final list by name.
    """
    if field.type != FieldType.OBJECT.value:
        return []

    type_name = exported_name(parent_name + exported_name(field_label))
    fields: list[FieldDef] = []
    nested: list[TypeDef] = []

    for prop_name in sorted(field.properties):
        prop = field.properties[prop_name]
        prop_type, recurse = resolver.resolve_field_type(prop, type_name + exported_name(prop_name))
        is_array = prop.type == FieldType.ARRAY.value

        fields.append(
            FieldDef(
                name=exported_name(prop_name),
                description=prop.description,
                type=prop_type,
                is_array=is_array,
                elem_type=resolver.element_type(prop_type) if is_array else "",
                required=prop.required,
                non_empty=prop.non_empty,
                recurse_validate=recurse,
            )
        )

        if prop.type == FieldType.OBJECT.value:
            nested.extend(flatten(type_name, prop_name, prop, resolver))
        elif is_array:
            # Arrays of arrays name their innermost objects ...ItemItem.
            items, label = prop.items, prop_name + "Item"
            while items is not None and items.type == FieldType.ARRAY.value:
                items, label = items.items, label + "Item"
            if items is not None and items.type == FieldType.OBJECT.value:
                nested.extend(flatten(type_name, label, items, resolver))

    logger.debug("flattened %s (%d fields)", type_name, len(fields))
    return nested + [TypeDef(name=type_name, description=field.description, fields=fields)]


def flatten_body(owner_name: str, label: str, body: HTTPBody, resolver: TypeResolver) -> list[TypeDef]:
    """Flatten a request/response body, which is always a required object."""
    field = Field(
        type=FieldType.OBJECT.value,
        description=body.description,
        properties=body.properties,
        required=True,
    )
    return flatten(owner_name, label, field, resolver)


def sort_types(types: list[TypeDef]) -> list[TypeDef]:
    return sorted(types, key=lambda t: t.name)
