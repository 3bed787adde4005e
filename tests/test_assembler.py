import pytest

from napiway.errors import GenerationError
from napiway.ir.assembler import build_api, build_endpoint, build_request, build_responses
from napiway.ir.resolver import GO_RESOLVER, TS_RESOLVER
from napiway.spec.base import Endpoint, HTTPBody, Response, Specification


def _type_names(types):
    return [t.name for t in types]


class TestBuildRequest:
    def test_json_body(self, spec):
        req = build_request("CreateUser", spec.endpoints["CreateUser"], spec.auth, GO_RESOLVER)
        assert req.name == "CreateUserRequest"
        assert req.method == "POST"
        assert req.path == "/users/new"
        assert req.content_type == "application/json"
        assert req.description == "Create a new user in the system."
        assert req.body_type_name == "CreateUserRequestBody"
        assert _type_names(req.supporting_types) == ["CreateUserRequestBody"]
        assert [f.name for f in req.supporting_types[0].fields] == ["Age", "Email", "UserName"]
        assert [m.id for m in req.auth_all] == ["apiKey", "adminToken"]
        assert req.auth_any == []

    def test_path_params_and_auth(self, spec):
        req = build_request("GetUser", spec.endpoints["GetUser"], spec.auth, GO_RESOLVER)
        assert [(p.name, p.transport_name, p.type) for p in req.path_params] == [("UserId", "userId", "string")]
        assert [m.id for m in req.auth_all] == ["apiKey"]
        assert [m.id for m in req.auth_any] == ["sessionToken", "refreshToken"]
        assert req.body_type_name is None
        assert req.supporting_types == []

    def test_query_params(self, spec):
        req = build_request("ListUsers", spec.endpoints["ListUsers"], spec.auth, TS_RESOLVER)
        assert [(p.name, p.transport_name, p.type) for p in req.query_params] == [
            ("PageNumber", "page", "number"),
            ("PageSize", "size", "number"),
        ]

    def test_non_json_body_has_no_types(self, spec):
        req = build_request("LogoutUser", spec.endpoints["LogoutUser"], spec.auth, GO_RESOLVER)
        assert req.content_type == "application/x-www-form-urlencoded"
        assert req.body_type_name is None
        assert req.supporting_types == []
        assert [p.transport_name for p in req.header_params] == ["X-Request-Id"]

    def test_max_body_bytes_passed_through(self):
        ep = Endpoint(method="POST", path="/upload", max_body_bytes=1024)
        assert build_request("Upload", ep, [], GO_RESOLVER).max_body_bytes == 1024


class TestBuildResponses:
    def test_ascending_status_codes(self, spec):
        responses = build_responses("CreateUser", spec.endpoints["CreateUser"], GO_RESOLVER)
        assert list(responses) == [201, 400]

    def test_nested_body_types(self, spec):
        resp = build_responses("CreateUser", spec.endpoints["CreateUser"], GO_RESOLVER)[201]
        assert resp.name == "CreateUser201Response"
        assert resp.status_code == 201
        assert resp.description == "User created."
        assert resp.body_type_name == "CreateUser201ResponseBody"
        assert _type_names(resp.supporting_types) == ["CreateUser201ResponseBody", "CreateUser201ResponseBodyUser"]

    def test_array_body_types(self, spec):
        resp = build_responses("ListUsers", spec.endpoints["ListUsers"], TS_RESOLVER)[200]
        types = {t.name: t for t in resp.supporting_types}
        assert _type_names(resp.supporting_types) == ["ListUsers200ResponseBody", "ListUsers200ResponseBodyUsersItem"]
        users = next(f for f in types["ListUsers200ResponseBody"].fields if f.name == "Users")
        assert users.type == "Array<ListUsers200ResponseBodyUsersItem>"
        assert users.recurse_validate is True
        tags = next(f for f in types["ListUsers200ResponseBodyUsersItem"].fields if f.name == "Tags")
        assert tags.type == "Array<string>"
        assert [(h.name, h.transport_name, h.required) for h in resp.headers] == [("TotalCount", "X-Total-Count", True)]

    def test_response_without_body(self, spec):
        resp = build_responses("GetUser", spec.endpoints["GetUser"], GO_RESOLVER)[404]
        assert resp.content_type == "application/json"
        assert resp.body_type_name is None
        assert resp.supporting_types == []

    def test_non_json_response_body(self, spec):
        resp = build_responses("HealthCheck", spec.endpoints["HealthCheck"], GO_RESOLVER)[200]
        assert resp.content_type == "text/plain"
        assert resp.body_type_name is None
        assert resp.supporting_types == []


class TestBuildEndpoint:
    def test_duplicate_type_names_rejected(self):
        body = HTTPBody.model_validate(
            {
                "properties": {
                    "A": {"type": "object", "properties": {"B": {"type": "object", "properties": {"X": {"type": "string"}}}}},
                    "AB": {"type": "object", "properties": {"Y": {"type": "string"}}},
                }
            }
        )
        ep = Endpoint(method="POST", path="/x", content_type="application/json", request_body=body)
        spec = Specification(api_name="X", version="1", endpoints={"Ep": ep})
        with pytest.raises(GenerationError, match="duplicate generated type name: EpRequestBodyAB"):
            build_endpoint("Ep", ep, spec, GO_RESOLVER)

    def test_duplicate_field_names_rejected(self):
        body = HTTPBody.model_validate({"properties": {"name": {"type": "string"}, "Name": {"type": "number"}}})
        ep = Endpoint(method="POST", path="/x", content_type="application/json", request_body=body)
        spec = Specification(api_name="X", version="1", endpoints={"Ep": ep})
        with pytest.raises(GenerationError) as exc_info:
            build_endpoint("Ep", ep, spec, TS_RESOLVER)
        assert str(exc_info.value) == "endpoint Ep: duplicate generated field name: EpRequestBody.Name"

    def test_case_distinct_nested_objects_rejected(self):
        body = HTTPBody.model_validate(
            {
                "properties": {
                    "info": {"type": "object", "properties": {"X": {"type": "string"}}},
                    "Info": {"type": "object", "properties": {"Y": {"type": "string"}}},
                }
            }
        )
        ep = Endpoint(method="POST", path="/x", content_type="application/json", request_body=body)
        spec = Specification(api_name="X", version="1", endpoints={"Ep": ep})
        with pytest.raises(GenerationError, match="duplicate generated"):
            build_endpoint("Ep", ep, spec, GO_RESOLVER)

    def test_lower_case_endpoint_name(self):
        ep = Endpoint(method="GET", path="/x", responses={200: Response(body=HTTPBody.model_validate({"properties": {"Ok": {"type": "boolean"}}}))})
        spec = Specification(api_name="X", version="1", endpoints={"ping": ep})
        endpoint_ir = build_endpoint("ping", ep, spec, GO_RESOLVER)
        assert endpoint_ir.name == "Ping"
        assert endpoint_ir.request.name == "PingRequest"
        assert endpoint_ir.responses[200].body_type_name == "Ping200ResponseBody"
        assert _type_names(endpoint_ir.responses[200].supporting_types) == ["Ping200ResponseBody"]


class TestBuildApi:
    def test_sorted_endpoints(self, spec):
        api = build_api(spec, GO_RESOLVER, target="goSdk")
        assert [e.name for e in api.endpoints] == ["CreateUser", "GetUser", "HealthCheck", "ListUsers", "LogoutUser"]
        assert api.client_name == "TestingAPI"
        assert api.version == "1.0.0"
        assert api.target == "goSdk"

    def test_parallel_matches_sequential(self, spec):
        sequential = build_api(spec, TS_RESOLVER, target="tsSdk")
        parallel = build_api(spec, TS_RESOLVER, target="tsSdk", max_workers=4)
        assert parallel.model_dump_json() == sequential.model_dump_json()

    def test_repeated_builds_identical(self, spec):
        assert build_api(spec, GO_RESOLVER).model_dump_json() == build_api(spec, GO_RESOLVER).model_dump_json()

    def test_does_not_mutate_spec(self, spec):
        before = spec.model_dump()
        build_api(spec, GO_RESOLVER, max_workers=2)
        assert spec.model_dump() == before
