from unittest import mock

import pytest
import requests

from pizza_sales_dashboard.data.connectors import (
    DatasetLoadError,
    HttpJsonConnector,
    JsonFileConnector,
    create_connector,
)


def test_file_connector_loads_document(write_dataset, scenario_raw):
    path = write_dataset(scenario_raw)
    with JsonFileConnector(path) as connector:
        assert connector.load() == scenario_raw


def test_file_connector_missing_file(tmp_path):
    connector = JsonFileConnector(str(tmp_path / "missing.json"))
    with pytest.raises(DatasetLoadError):
        connector.load()


def test_file_connector_invalid_json(tmp_path):
    path = tmp_path / "broken.json"
    path.write_text("[{\"date\": ", encoding="utf-8")
    with pytest.raises(DatasetLoadError):
        JsonFileConnector(str(path)).load()


def _session_returning(payload=None, status_error=None, json_error=None):
    response = mock.Mock()
    if status_error is not None:
        response.raise_for_status.side_effect = status_error
    if json_error is not None:
        response.json.side_effect = json_error
    else:
        response.json.return_value = payload
    session = mock.Mock(spec=requests.Session)
    session.get.return_value = response
    return session


def test_http_connector_fetches_document(scenario_raw):
    session = _session_returning(scenario_raw)
    connector = HttpJsonConnector("http://example.test/dataset_23.json", session=session)
    with connector:
        assert connector.load() == scenario_raw
    session.get.assert_called_once_with("http://example.test/dataset_23.json")
    # A caller-provided session is left open
    session.close.assert_not_called()


def test_http_connector_network_error():
    session = mock.Mock(spec=requests.Session)
    session.get.side_effect = requests.ConnectionError("connection refused")
    connector = HttpJsonConnector("http://example.test/dataset_23.json", session=session)
    with pytest.raises(DatasetLoadError):
        connector.load()


def test_http_connector_status_error():
    session = _session_returning(status_error=requests.HTTPError("404 Not Found"))
    with pytest.raises(DatasetLoadError):
        HttpJsonConnector("http://example.test/missing.json", session=session).load()


def test_http_connector_invalid_json():
    session = _session_returning(json_error=ValueError("Expecting value"))
    with pytest.raises(DatasetLoadError):
        HttpJsonConnector("http://example.test/dataset_23.json", session=session).load()


def test_create_connector_picks_by_source():
    assert isinstance(create_connector("https://example.test/data.json"), HttpJsonConnector)
    assert isinstance(create_connector("HTTP://example.test/data.json"), HttpJsonConnector)
    assert isinstance(create_connector("dataset_23.json"), JsonFileConnector)
