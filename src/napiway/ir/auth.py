"""Splits an endpoint's auth requirements into ALL and ANY sets."""

from napiway.errors import UnsupportedTypeError
from napiway.ir.models import AuthMethodDef, AuthMethodKind
from napiway.spec.base import AuthMethod, AuthMethodType, Endpoint


def classify(endpoint: Endpoint, global_auth: list[AuthMethod]) -> tuple[list[AuthMethodDef], list[AuthMethodDef]]:
    """Return (all_set, any_set) for ``endpoint``.

    The global auth list drives the order, not the order of IDs on the
    endpoint. An ID listed in both ``all`` and ``any`` lands in ``all_set``
    only.
    """
    all_set: list[AuthMethodDef] = []
    any_set: list[AuthMethodDef] = []
    if endpoint.auth is None:
        return all_set, any_set

    for method in global_auth:
        if method.id in endpoint.auth.all:
            all_set.append(to_auth_method_def(method))
            continue
        if method.id in endpoint.auth.any:
            any_set.append(to_auth_method_def(method))

    return all_set, any_set


def to_auth_method_def(method: AuthMethod) -> AuthMethodDef:
    return AuthMethodDef(
        id=method.id,
        name=method.name,
        transport_name=method.transport_name,
        type=_auth_kind(method.type),
        description=method.description,
        format=method.format,
    )


def _auth_kind(tag: str) -> AuthMethodKind:
    try:
        auth_type = AuthMethodType(tag)
    except ValueError:
        raise UnsupportedTypeError("auth method", tag) from None
    if auth_type is AuthMethodType.HEADER:
        return AuthMethodKind.HEADER
    raise UnsupportedTypeError("auth method", tag)
