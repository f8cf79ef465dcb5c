"""Unit tests for the jiraassets_object_schema data source."""

import pytest

from jiraassets_provider.framework import (
    ComponentConfigureRequest,
    ComponentConfigureResponse,
    DataSourceReadRequest,
    DataSourceReadResponse,
)
from jiraassets_provider.object_schema_datasource import ObjectSchemaDataSource

SCHEMA_JSON = {
    "workspaceId": "ws-1",
    "globalId": "ws-1:100",
    "id": "100",
    "name": "IT Assets",
    "objectSchemaKey": "ITSM",
    "status": "Ok",
    "description": "Hardware and software",
    "created": "2023-05-01T08:00:00.000Z",
    "updated": "2024-02-01T08:00:00.000Z",
    "objectCount": 1542,
    "objectTypeCount": 18,
    "canManage": True,
    "idAsInt": 100,
}


@pytest.fixture
def data_source(configure) -> ObjectSchemaDataSource:
    return configure(ObjectSchemaDataSource())


def read(data_source: ObjectSchemaDataSource, schema_id) -> DataSourceReadResponse:
    resp = DataSourceReadResponse()
    data_source.read(DataSourceReadRequest(config={"id": schema_id}), resp)
    return resp


class TestRead:
    """Tests for ObjectSchemaDataSource.read."""

    def test_read_populates_all_fields(self, data_source, fake_api):
        fake_api.schemas["100"] = SCHEMA_JSON

        resp = read(data_source, "100")

        assert not resp.diagnostics.has_error()
        assert resp.state == {
            "workspace_id": "ws-1",
            "global_id": "ws-1:100",
            "id": "100",
            "name": "IT Assets",
            "object_schema_key": "ITSM",
            "status": "Ok",
            "description": "Hardware and software",
            "created": "2023-05-01T08:00:00.000Z",
            "updated": "2024-02-01T08:00:00.000Z",
            "object_count": 1542,
            "object_type_count": 18,
            "can_manage": True,
            "id_as_int": 100,
        }
        assert fake_api.calls == [("GET", "objectschema/100", None)]

    def test_id_as_int_derived_when_absent(self, data_source, fake_api):
        payload = dict(SCHEMA_JSON)
        del payload["idAsInt"]
        fake_api.schemas["100"] = payload

        resp = read(data_source, "100")

        assert resp.state["id_as_int"] == 100

    def test_created_status_is_rejected(self, data_source, fake_api):
        """Only 200 counts as success, even for other 2xx codes."""
        fake_api.fail("GET", "objectschema/100", 201, SCHEMA_JSON)

        resp = read(data_source, "100")

        assert resp.state is None
        errors = resp.diagnostics.errors()
        assert len(errors) == 1
        assert errors[0].summary == "Unexpected HTTP status code from Assets API"
        assert errors[0].detail == "201 Created"

    def test_not_found_is_rejected(self, data_source, fake_api):
        resp = read(data_source, "100")

        assert resp.state is None
        errors = resp.diagnostics.errors()
        assert len(errors) == 1
        assert errors[0].summary == "Unable to read Assets object schema"

    def test_malformed_body_is_rejected(self, data_source, fake_api):
        fake_api.fail("GET", "objectschema/100", 200, {"name": "no id"})

        resp = read(data_source, "100")

        assert resp.state is None
        assert resp.diagnostics.errors()[0].summary == "Unable to read Assets object schema"

    @pytest.mark.parametrize("schema_id", ["", "abc", None, 100])
    def test_non_numeric_id_is_rejected(self, data_source, fake_api, schema_id):
        resp = read(data_source, schema_id)

        assert resp.diagnostics.errors()[0].attribute == "id"
        assert fake_api.calls == []


class TestConfigure:
    """Tests for ObjectSchemaDataSource.configure."""

    def test_wrong_provider_data_type(self):
        data_source = ObjectSchemaDataSource()
        resp = ComponentConfigureResponse()

        data_source.configure(ComponentConfigureRequest(provider_data=object()), resp)

        assert resp.diagnostics.errors()[0].summary == "Unexpected Data Source Configure Type"

    def test_unconfigured_read(self):
        resp = DataSourceReadResponse()
        ObjectSchemaDataSource().read(DataSourceReadRequest(config={"id": "100"}), resp)

        assert resp.diagnostics.errors()[0].summary == "Unconfigured Assets client"


def test_schema_has_twelve_computed_fields():
    schema = ObjectSchemaDataSource().schema()

    assert schema.attributes["id"].required
    assert len(schema.computed_names()) == 12
