"""Builds the per-endpoint request/response IR for one target.

Endpoint IR construction only reads the specification, so ``build_api`` can
fan it out over a thread pool. Endpoints are sorted by name afterwards,
which makes the result independent of completion order.
"""

from concurrent.futures import ThreadPoolExecutor

from napiway.errors import GenerationError
from napiway.ir.auth import classify
from napiway.ir.flatten import flatten_body, sort_types
from napiway.ir.models import ApiIR, EndpointIR, RequestIR, ResponseIR
from napiway.ir.params import bind_all
from napiway.ir.resolver import TypeResolver
from napiway.log import get_logger
from napiway.naming import client_name, exported_name, request_name, response_name
from napiway.spec.base import DEFAULT_CONTENT_TYPE, AuthMethod, Endpoint, Specification

logger = get_logger(__name__)


def build_request(
    endpoint_name: str,
    endpoint: Endpoint,
    global_auth: list[AuthMethod],
    resolver: TypeResolver,
) -> RequestIR:
    """Assemble the RequestIR: params, flattened JSON body types and auth sets."""
    content_type = endpoint.content_type or DEFAULT_CONTENT_TYPE
    auth_all, auth_any = classify(endpoint, global_auth)

    types = []
    body_type_name = None
    if endpoint.request_body is not None and content_type == DEFAULT_CONTENT_TYPE:
        owner = exported_name(endpoint_name)
        body_type_name = owner + "RequestBody"
        types = flatten_body(owner, "RequestBody", endpoint.request_body, resolver)

    return RequestIR(
        name=request_name(endpoint_name),
        description=endpoint.description,
        content_type=content_type,
        method=endpoint.method,
        path=endpoint.path,
        max_body_bytes=endpoint.max_body_bytes,
        header_params=bind_all(endpoint.headers, resolver),
        query_params=bind_all(endpoint.query_params, resolver),
        path_params=bind_all(endpoint.path_params, resolver),
        supporting_types=sort_types(types),
        body_type_name=body_type_name,
        auth_all=auth_all,
        auth_any=auth_any,
    )


def build_responses(endpoint_name: str, endpoint: Endpoint, resolver: TypeResolver) -> dict[int, ResponseIR]:
    """One ResponseIR per declared status code, in ascending status order."""
    responses: dict[int, ResponseIR] = {}
    for status in sorted(endpoint.responses):
        response = endpoint.responses[status]
        name = response_name(endpoint_name, status)
        content_type = response.content_type or DEFAULT_CONTENT_TYPE

        types = []
        body_type_name = None
        if response.body is not None and content_type == DEFAULT_CONTENT_TYPE:
            body_type_name = name + "Body"
            types = flatten_body(name, "Body", response.body, resolver)

        responses[status] = ResponseIR(
            status_code=status,
            name=name,
            description=response.description,
            content_type=content_type,
            headers=bind_all(response.headers, resolver),
            supporting_types=sort_types(types),
            body_type_name=body_type_name,
        )
    return responses


def build_endpoint(
    endpoint_name: str,
    endpoint: Endpoint,
    spec: Specification,
    resolver: TypeResolver,
) -> EndpointIR:
    logger.debug("building IR for endpoint %s (%s)", endpoint_name, resolver.language)
    endpoint_ir = EndpointIR(
        name=exported_name(endpoint_name),
        request=build_request(endpoint_name, endpoint, spec.auth, resolver),
        responses=build_responses(endpoint_name, endpoint, resolver),
    )
    _check_unique_names(endpoint_ir)
    return endpoint_ir


def _check_unique_names(endpoint_ir: EndpointIR) -> None:
    """Reject endpoints whose generated type or field names collide.

    ``A.B`` and ``AB`` under one parent would both become ``...AB``; sibling
    properties ``name`` and ``Name`` would both become the field ``Name``.
    """
    seen = set()
    all_types = list(endpoint_ir.request.supporting_types)
    for response in endpoint_ir.responses.values():
        all_types.extend(response.supporting_types)
    for type_def in all_types:
        if type_def.name in seen:
            raise GenerationError(f"endpoint {endpoint_ir.name}: duplicate generated type name: {type_def.name}")
        seen.add(type_def.name)

        field_names = set()
        for field in type_def.fields:
            if field.name in field_names:
                raise GenerationError(
                    f"endpoint {endpoint_ir.name}: duplicate generated field name: {type_def.name}.{field.name}"
                )
            field_names.add(field.name)


def build_api(
    spec: Specification,
    resolver: TypeResolver,
    target: str = "",
    max_workers: int | None = None,
) -> ApiIR:
    """Build the IR for every endpoint of a validated specification.

    With ``max_workers`` greater than one the endpoints are built
    concurrently; the output is identical to the sequential build.
    """
    names = sorted(spec.endpoints)

    if max_workers is not None and max_workers > 1 and len(names) > 1:
        with ThreadPoolExecutor(max_workers=max_workers) as pool:
            futures = [
                pool.submit(build_endpoint, name, spec.endpoints[name], spec, resolver)
                for name in names
            ]
            endpoints = [f.result() for f in futures]
    else:
        endpoints = [build_endpoint(name, spec.endpoints[name], spec, resolver) for name in names]

    endpoints.sort(key=lambda e: e.name)
    logger.info("built IR for %d endpoints (%s)", len(endpoints), resolver.language)

    return ApiIR(
        api_name=spec.api_name,
        client_name=client_name(spec.api_name),
        version=spec.version,
        description=spec.description,
        target=target,
        endpoints=endpoints,
    )
