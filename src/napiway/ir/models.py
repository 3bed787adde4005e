"""Intermediate representation handed to code emitters.

Everything here is fully resolved for one target language: field and
parameter types are already target type names, auth references are already
looked up, and every list is in a deterministic order.
"""

from enum import Enum

from pydantic import BaseModel


class AuthMethodKind(str, Enum):
    HEADER = "header"


class FieldDef(BaseModel):
    """A field of a generated type."""

    name: str  # exported, e.g. "UserName"
    description: str | None = None
    # Target type without optionality markers: "string", "[]ListItemsItem", "Array<number>".
    type: str
    is_array: bool = False
    elem_type: str = ""  # element type when is_array
    required: bool = False
    non_empty: bool = False
    # The type (or the element type, for arrays) has its own validation.
    recurse_validate: bool = False


class TypeDef(BaseModel):
    name: str
    description: str | None = None
    fields: list[FieldDef] = []


class ParamDef(BaseModel):
    name: str
    transport_name: str
    type: str
    required: bool = False
    description: str | None = None


class AuthMethodDef(BaseModel):
    id: str
    name: str
    transport_name: str
    type: AuthMethodKind
    description: str | None = None
    format: str | None = None


class RequestIR(BaseModel):
    name: str  # "CreateUserRequest"
    description: str | None = None
    content_type: str
    method: str
    path: str
    max_body_bytes: int | None = None
    header_params: list[ParamDef] = []
    query_params: list[ParamDef] = []
    path_params: list[ParamDef] = []
    supporting_types: list[TypeDef] = []  # sorted by name
    body_type_name: str | None = None
    auth_all: list[AuthMethodDef] = []
    auth_any: list[AuthMethodDef] = []


class ResponseIR(BaseModel):
    status_code: int
    name: str  # "CreateUser201Response"
    description: str | None = None
    content_type: str
    headers: list[ParamDef] = []
    supporting_types: list[TypeDef] = []  # sorted by name
    body_type_name: str | None = None


class EndpointIR(BaseModel):
    name: str
    request: RequestIR
    responses: dict[int, ResponseIR] = {}  # ascending status code


class ApiIR(BaseModel):
    """IR of a whole API for one target."""

    api_name: str
    client_name: str
    version: str
    description: str = ""
    target: str
    endpoints: list[EndpointIR] = []  # sorted by name
