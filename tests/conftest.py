"""Shared fixtures"""

import json
from typing import Any, List, Optional

import pytest
import requests

from bellingcat_toolkit.catalog.loader import CatalogLoader
from bellingcat_toolkit.catalog.record import ToolRecord
from bellingcat_toolkit.config.toolkit_config import reset_config

TEST_URL = "https://example.test/tools.json"


class FakeResponse:
    """Minimal stand-in for requests.Response"""

    def __init__(self, payload: Any = None, status_code: int = 200, text: Optional[str] = None):
        self.status_code = status_code
        self._payload = payload
        self.text = text if text is not None else json.dumps(payload)

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.exceptions.HTTPError(f"{self.status_code} Error", response=self)

    def json(self):
        try:
            return json.loads(self.text)
        except ValueError as e:
            raise requests.exceptions.JSONDecodeError(str(e), self.text, 0) from e


@pytest.fixture(autouse=True)
def _isolated_config(monkeypatch, tmp_path):
    for name in ("TOOLKIT_TOOLS_URL", "TOOLKIT_OUTPUT_DIR", "TOOLKIT_FETCH_TIMEOUT", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    reset_config()
    yield
    reset_config()


@pytest.fixture
def scenario_tools() -> List[ToolRecord]:
    return [
        ToolRecord(name="Shodan", category="Network Intelligence"),
        ToolRecord(
            name="WHOIS Lookup",
            description="Check domain registration info.",
            category="Domain Investigation",
        ),
    ]


@pytest.fixture
def remote_payload() -> List[dict]:
    return [
        {
            "name": "InVID",
            "description": "Verify videos and images.",
            "url": "https://www.invid-project.eu/",
            "category": "Image/Video Verification",
        },
        {"name": "Wayback Machine", "url": "https://web.archive.org/", "category": "Archiving"},
        {"name": "Untitled helper"},
        {
            "name": "Sentinel Hub",
            "description": "Satellite imagery browser.",
            "category": "Satellite Imagery",
            "tags": ["geo", "satellite"],
        },
    ]


@pytest.fixture
def fake_get(monkeypatch):
    """Install a fake requests.get; returns the list of recorded calls"""
    calls = []

    def install(response=None, exc: Optional[Exception] = None):
        def _get(url, timeout=None, **kwargs):
            calls.append({"url": url, "timeout": timeout})
            if exc is not None:
                raise exc
            return response

        monkeypatch.setattr("bellingcat_toolkit.catalog.loader.requests.get", _get)
        return calls

    return install


@pytest.fixture
def loader() -> CatalogLoader:
    return CatalogLoader(tools_url=TEST_URL)
