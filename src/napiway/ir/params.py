"""Binds header, query and path parameter declarations to ParamDefs."""

from napiway.ir.models import ParamDef
from napiway.ir.resolver import TypeResolver
from napiway.naming import exported_name
from napiway.spec.base import Param


def bind(param: Param, resolver: TypeResolver) -> ParamDef:
    return ParamDef(
        name=exported_name(param.name),
        transport_name=param.transport_name,
        type=resolver.resolve_param_type(param),
        required=param.required,
        description=param.description,
    )


def bind_all(params: list[Param], resolver: TypeResolver) -> list[ParamDef]:
    """Bind a list of params, keeping the declared order."""
    return [bind(p, resolver) for p in params]
