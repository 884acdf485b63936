import pytest
from pydantic import BaseModel

from routespec.builder.definitions import name_for_type
from routespec.registry.base import ParameterKind, RouteRecord
from routespec.registry.service import WebService


class Sample(BaseModel):
    id: int


class TestWebService:
    def test_route_is_joined_to_root_path(self):
        ws = WebService(root_path="/tests/{v}/")
        ws.get("/a/{b}")
        assert ws.routes()[0].path == "/tests/{v}/a/{b}"

    def test_route_inherits_media_types(self):
        ws = WebService(consumes=["application/json"], produces=["application/xml"])
        ws.get("/a")
        ws.post("/a", consumes=["text/plain"])
        get, post = ws.routes()
        assert get.consumes == ["application/json"]
        assert get.produces == ["application/xml"]
        assert post.consumes == ["text/plain"]

    def test_route_does_not_mutate_registered_record(self):
        record = RouteRecord(method="GET", path="/a")
        WebService(root_path="/root", consumes=["application/json"]).route(record)
        assert record.path == "/a"
        assert record.consumes == []

    def test_registration_order_is_kept(self):
        ws = WebService()
        ws.put("/c").delete("/a").patch("/b").options("/d").head("/e")
        assert [r.method for r in ws.routes()] == ["PUT", "DELETE", "PATCH", "OPTIONS", "HEAD"]

    def test_service_parameters(self):
        ws = WebService(root_path="/tests/{v}")
        ws.param(ws.path_parameter("v", "value of v", default_value="default-v"))
        params = ws.path_parameters()
        assert len(params) == 1
        assert params[0].kind is ParameterKind.PATH
        assert params[0].required is True

    def test_parameter_helpers(self):
        ws = WebService()
        assert ws.query_parameter("q").kind is ParameterKind.QUERY
        assert ws.header_parameter("X-Trace").kind is ParameterKind.HEADER
        assert ws.form_parameter("file").kind is ParameterKind.FORM

    def test_body_parameter_names_model(self):
        body = WebService.body_parameter("body", Sample, "a sample")
        assert body.kind is ParameterKind.BODY
        assert body.data_type == name_for_type(Sample)
        assert body.model is Sample
        assert body.description == "a sample"

    def test_body_parameter_requires_resolvable_model(self):
        with pytest.raises(ValueError, match="no resolvable model"):
            WebService.body_parameter("body", None)
        with pytest.raises(ValueError, match="no resolvable model"):
            WebService.body_parameter("body", [])
