"""Tests for container create, delete, update and get operations."""

import httpx
import pytest

from swift_tools.core.exceptions import (
    TransportError,
    UnexpectedStatusError,
    ValidationError,
)
from swift_tools.objectstorage import (
    GetResult,
    RequestExecutor,
    create_container,
    delete_container,
    extract_metadata,
    get_container,
    header_value,
    metadata_header,
    update_container,
)
from swift_tools.schemas import CreateOpts, DeleteOpts, GetOpts, UpdateOpts

from conftest import AUTH_TOKEN, container_path


class TestMetadataHeaders:
    """Test the metadata header naming convention."""

    def test_single_word_key(self):
        """Test a key is capitalized after the prefix."""
        assert metadata_header("color") == "X-Container-Meta-Color"

    def test_dashed_key(self):
        """Test each dash-separated part is capitalized."""
        assert metadata_header("content-owner") == "X-Container-Meta-Content-Owner"

    def test_ascii_value_unchanged(self):
        """Test ASCII header values are sent as given."""
        assert header_value(".r:*,.rlistings") == ".r:*,.rlistings"

    def test_non_ascii_value_encoded(self):
        """Test non-ASCII header values are percent-encoded UTF-8."""
        assert header_value("Jos\u00e9") == "Jos%C3%A9"


class TestCreateContainer:
    """Test container creation."""

    def test_create_returns_container(self, service_client, swift_api):
        """Test 201 Created returns the container name."""
        route = swift_api.put(path=container_path("photos")).respond(201)

        container = create_container(service_client, CreateOpts(name="photos"))

        assert container == {"name": "photos"}
        assert route.call_count == 1
        assert route.calls.last.request.headers["X-Auth-Token"] == AUTH_TOKEN

    def test_create_existing_container(self, service_client, swift_api):
        """Test 204 for an existing container also counts as success."""
        swift_api.put(path=container_path("photos")).respond(204)

        assert create_container(service_client, CreateOpts(name="photos")) == {
            "name": "photos"
        }

    def test_create_forbidden(self, service_client, swift_api):
        """Test 403 raises with the status and no result."""
        swift_api.put(path=container_path("photos")).respond(403)

        with pytest.raises(UnexpectedStatusError) as excinfo:
            create_container(service_client, CreateOpts(name="photos"))

        assert excinfo.value.status_code == 403
        assert excinfo.value.operation == "create"

    def test_create_sends_metadata_and_headers(self, service_client, swift_api):
        """Test metadata and header overrides are sent."""
        route = swift_api.put(path=container_path("photos")).respond(201)

        create_container(
            service_client,
            CreateOpts(
                name="photos",
                headers={"X-Container-Read": ".r:*"},
                metadata={"color": "blue"},
            ),
        )

        request = route.calls.last.request
        assert (b"X-Container-Meta-Color", b"blue") in request.headers.raw
        assert request.headers["X-Container-Read"] == ".r:*"

    def test_header_override_wins_over_auth(self, service_client, swift_api):
        """Test caller headers are applied after the authenticated headers."""
        route = swift_api.put(path=container_path("photos")).respond(201)

        create_container(
            service_client,
            CreateOpts(name="photos", headers={"X-Auth-Token": "override"}),
        )

        assert route.calls.last.request.headers["X-Auth-Token"] == "override"

    def test_create_non_ascii_metadata(self, service_client, swift_api):
        """Test non-ASCII metadata values are sent percent-encoded."""
        route = swift_api.put(path=container_path("photos")).respond(201)

        create_container(
            service_client,
            CreateOpts(name="photos", metadata={"owner": "Jos\u00e9"}),
        )

        request = route.calls.last.request
        assert request.headers["X-Container-Meta-Owner"] == "Jos%C3%A9"

    def test_create_non_ascii_header_name(self, service_client, swift_api):
        """Test a header name that cannot be sent raises ValidationError."""
        route = swift_api.put(path=container_path("photos")).respond(201)

        with pytest.raises(ValidationError, match="ASCII"):
            create_container(
                service_client,
                CreateOpts(name="photos", headers={"X-Caf\u00e9": "1"}),
            )

        assert route.call_count == 0

    def test_create_transport_error(self, service_client, swift_api):
        """Test network failures surface as TransportError."""
        swift_api.put(path=container_path("photos")).mock(
            side_effect=httpx.ConnectError("connection refused")
        )

        with pytest.raises(TransportError):
            create_container(service_client, CreateOpts(name="photos"))


class TestDeleteContainer:
    """Test container deletion."""

    def test_delete_success(self, service_client, swift_api):
        """Test 204 No Content returns None."""
        route = swift_api.delete(path=container_path("photos")).respond(204)

        assert delete_container(service_client, DeleteOpts(name="photos")) is None
        assert route.call_count == 1

    def test_delete_missing(self, service_client, swift_api):
        """Test 404 raises with the status."""
        swift_api.delete(path=container_path("photos")).respond(404)

        with pytest.raises(UnexpectedStatusError) as excinfo:
            delete_container(service_client, DeleteOpts(name="photos"))

        assert excinfo.value.status_code == 404
        assert excinfo.value.operation == "delete"

    def test_delete_twice_same_error(self, service_client, swift_api):
        """Test repeating a delete of a missing container fails the same way."""
        swift_api.delete(path=container_path("photos")).respond(404)

        errors = []
        for _ in range(2):
            with pytest.raises(UnexpectedStatusError) as excinfo:
                delete_container(service_client, DeleteOpts(name="photos"))
            errors.append(excinfo.value)

        assert [type(e) for e in errors] == [UnexpectedStatusError] * 2
        assert [e.status_code for e in errors] == [404, 404]

    def test_delete_sends_params(self, service_client, swift_api):
        """Test query parameters are appended to the container URL."""
        route = swift_api.delete(path=container_path("photos")).respond(204)

        delete_container(
            service_client, DeleteOpts(name="photos", params={"force": "true"})
        )

        assert route.calls.last.request.url.params["force"] == "true"

    def test_delete_conflict(self, service_client, swift_api):
        """Test deleting a non-empty container raises with 409."""
        swift_api.delete(path=container_path("photos")).respond(409)

        with pytest.raises(UnexpectedStatusError) as excinfo:
            delete_container(service_client, DeleteOpts(name="photos"))

        assert excinfo.value.status_code == 409


class TestUpdateContainer:
    """Test container metadata updates."""

    def test_update_success(self, service_client, swift_api):
        """Test 204 counts as success and metadata is sent."""
        route = swift_api.post(path=container_path("photos")).respond(204)

        update_container(
            service_client, UpdateOpts(name="photos", metadata={"color": "blue"})
        )

        request = route.calls.last.request
        assert (b"X-Container-Meta-Color", b"blue") in request.headers.raw
        assert request.headers["X-Auth-Token"] == AUTH_TOKEN

    def test_update_unexpected_status(self, service_client, swift_api):
        """Test anything but 204 raises."""
        swift_api.post(path=container_path("photos")).respond(404)

        with pytest.raises(UnexpectedStatusError) as excinfo:
            update_container(service_client, UpdateOpts(name="photos"))

        assert excinfo.value.status_code == 404
        assert excinfo.value.operation == "update"


class TestGetContainer:
    """Test container metadata retrieval."""

    def test_get_returns_headers(self, service_client, swift_api):
        """Test the HEAD response headers are kept in the result."""
        swift_api.head(path=container_path("photos")).respond(
            204,
            headers={
                "X-Container-Object-Count": "3",
                "X-Container-Bytes-Used": "2048",
                "X-Container-Meta-Color": "blue",
                "X-Container-Meta-Content-Owner": "alice",
            },
        )

        result = get_container(service_client, GetOpts(name="photos"))

        assert isinstance(result, GetResult)
        assert result.status_code == 204
        assert result.object_count == 3
        assert result.bytes_used == 2048
        assert extract_metadata(result) == {
            "color": "blue",
            "content-owner": "alice",
        }

    def test_get_sends_metadata(self, service_client, swift_api):
        """Test request-side metadata headers are sent."""
        route = swift_api.head(path=container_path("photos")).respond(204)

        get_container(service_client, GetOpts(name="photos", metadata={"color": "blue"}))

        request = route.calls.last.request
        assert (b"X-Container-Meta-Color", b"blue") in request.headers.raw

    def test_get_missing(self, service_client, swift_api):
        """Test 404 raises."""
        swift_api.head(path=container_path("photos")).respond(404)

        with pytest.raises(UnexpectedStatusError) as excinfo:
            get_container(service_client, GetOpts(name="photos"))

        assert excinfo.value.status_code == 404

    def test_get_non_integer_usage_headers(self):
        """Test unreadable usage headers are reported as unknown."""
        result = GetResult(
            status_code=204,
            headers={
                "x-container-object-count": "n/a",
                "x-container-bytes-used": "",
            },
        )
        assert result.object_count is None
        assert result.bytes_used is None

    def test_get_without_usage_headers(self):
        """Test usage properties are None when the server omits them."""
        result = GetResult(status_code=204)
        assert result.object_count is None
        assert result.bytes_used is None
        assert extract_metadata(result) == {}


class TestSharedExecutor:
    """Test operations reusing a caller-supplied executor."""

    def test_operations_share_executor(self, service_client, swift_api):
        """Test one executor serves several operations and stays open."""
        swift_api.put(path=container_path("photos")).respond(201)
        swift_api.post(path=container_path("photos")).respond(204)
        swift_api.delete(path=container_path("photos")).respond(204)

        with RequestExecutor.for_client(service_client) as executor:
            create_container(service_client, CreateOpts(name="photos"), executor)
            update_container(
                service_client,
                UpdateOpts(name="photos", metadata={"color": "red"}),
                executor,
            )
            delete_container(service_client, DeleteOpts(name="photos"), executor)
            assert not executor.client.is_closed

        assert len(swift_api.calls) == 3
