"""Tests for the engine API client and name directories (HTTP mocked)."""

from unittest.mock import MagicMock

import pytest
import requests

from dockhand.client.directory import ContainerDirectory, NetworkDirectory
from dockhand.client.engine import EngineClient
from dockhand.completion.composite import IpcCompleter
from dockhand.completion.directive import Directive
from dockhand.completion.dynamic import DynamicSource
from dockhand.config.models import ApiConfig
from dockhand.utils.errors import LookupFailedError, ResourceError

CONTAINERS = [
    {"Id": "a1b2c3d4e5f6a7b8c9d0", "Names": ["/web"]},
    {"Id": "ffeeddccbbaa99887766", "Names": ["/db", "/web/db"]},
    {"Id": "0000", "Names": None},
]

NETWORKS = [{"Name": "bridge"}, {"Name": "host"}, {"Name": "backend"}, {"Id": "nameless"}]


def _response(payload=None, status_code=200, json_error=False):
    response = MagicMock()
    response.status_code = status_code
    if json_error:
        response.json.side_effect = ValueError("not json")
    else:
        response.json.return_value = payload
    return response


@pytest.fixture
def session():
    return MagicMock(spec=requests.Session)


@pytest.fixture
def client(session):
    return EngineClient(ApiConfig(base_url="http://engine:2375/", timeout=1.5), session=session)


class TestEngineClient:
    def test_base_url(self, client):
        assert client.base_url == "http://engine:2375"

    def test_api_version_in_url(self, session):
        client = EngineClient(ApiConfig(base_url="http://engine:2375", api_version="1.45"), session)
        assert client.base_url == "http://engine:2375/v1.45"

    def test_list_containers(self, client, session):
        session.get.return_value = _response(CONTAINERS)

        assert client.list_containers(show_all=False) == CONTAINERS
        session.get.assert_called_once_with(
            "http://engine:2375/containers/json", params={"all": 0}, timeout=1.5
        )

    def test_list_networks(self, client, session):
        session.get.return_value = _response(NETWORKS)

        assert client.list_networks() == NETWORKS
        session.get.assert_called_once_with("http://engine:2375/networks", params=None, timeout=1.5)

    def test_connection_error(self, client, session):
        """Test that transport errors become lookup failures with a hint."""
        session.get.side_effect = requests.exceptions.ConnectionError("refused")

        with pytest.raises(LookupFailedError) as exc_info:
            client.list_containers()

        assert isinstance(exc_info.value, ResourceError)
        assert "refused" in str(exc_info.value)
        assert exc_info.value.status_code is None
        if hasattr(exc_info.value, "add_note"):
            assert any("DOCKHAND_HOST" in note for note in exc_info.value.__notes__)

    def test_timeout(self, client, session):
        session.get.side_effect = requests.exceptions.Timeout()

        with pytest.raises(LookupFailedError, match="timed out"):
            client.list_networks()

    def test_http_error_status(self, client, session):
        session.get.return_value = _response(status_code=500)

        with pytest.raises(LookupFailedError) as exc_info:
            client.list_containers()

        assert exc_info.value.status_code == 500
        assert exc_info.value.resource == "containers"

    def test_invalid_json(self, client, session):
        session.get.return_value = _response(json_error=True)

        with pytest.raises(LookupFailedError, match="invalid JSON"):
            client.list_networks()

    def test_unexpected_payload(self, client, session):
        session.get.return_value = _response({"message": "nope"})

        with pytest.raises(LookupFailedError, match="unexpected"):
            client.list_containers()

    def test_non_dict_entries(self, client, session):
        """Test that a list holding non-object entries is rejected as a lookup failure."""
        session.get.return_value = _response(["web", {"Names": ["/db"]}])

        with pytest.raises(LookupFailedError, match="unexpected") as exc_info:
            client.list_containers()

        assert exc_info.value.resource == "containers"

    def test_non_dict_network_entries(self, client, session):
        session.get.return_value = _response([None])

        with pytest.raises(LookupFailedError, match="unexpected"):
            client.list_networks()

    def test_malformed_payload_completes_to_nothing(self, client, session):
        session.get.return_value = _response(["web", {"Names": ["/db"]}])
        completer = IpcCompleter(DynamicSource(ContainerDirectory(client)))

        assert completer(None, [], "container:") == ([], Directive.NO_FILE_COMP)

    def test_context_manager_closes_session(self, session):
        with EngineClient(ApiConfig(), session=session):
            pass
        session.close.assert_called_once()


class TestContainerDirectory:
    @pytest.fixture
    def engine(self):
        engine = MagicMock()
        engine.list_containers.return_value = CONTAINERS
        return engine

    def test_names_without_slash(self, engine):
        assert ContainerDirectory(engine).lookup("") == ["web", "db", "web/db"]

    def test_prefix_filter(self, engine):
        assert ContainerDirectory(engine).lookup("w") == ["web", "web/db"]

    def test_show_ids(self, engine):
        names = ContainerDirectory(engine, show_ids=True).lookup("")
        assert names == ["web", "db", "web/db", "a1b2c3d4e5f6", "ffeeddccbbaa", "0000"]

    def test_show_all_forwarded(self, engine):
        ContainerDirectory(engine, show_all=False).lookup("")
        engine.list_containers.assert_called_once_with(show_all=False)

    def test_errors_propagate(self, engine):
        engine.list_containers.side_effect = LookupFailedError("containers", "down")
        with pytest.raises(LookupFailedError):
            ContainerDirectory(engine).lookup("")


class TestNetworkDirectory:
    def test_names(self):
        engine = MagicMock()
        engine.list_networks.return_value = NETWORKS

        assert NetworkDirectory(engine).lookup("") == ["bridge", "host", "backend"]
        assert NetworkDirectory(engine).lookup("b") == ["bridge", "backend"]
