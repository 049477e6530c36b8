import sys
from pathlib import Path

import pytest
import requests

ROOT = Path(__file__).resolve().parents[1]
sys.path.append(str(ROOT))

from gamepass_relay.config import Settings  # noqa: E402


class _StubResponse:
    def __init__(self, status_code=200, payload=None, bad_json=False):
        self.status_code = status_code
        self._payload = payload
        self._bad_json = bad_json

    def json(self):
        if self._bad_json:
            raise ValueError("Expecting value: line 1 column 1 (char 0)")
        return self._payload


class StubSession:
    """
    Plays back one scripted outcome per GET: a _StubResponse, or an
    exception to raise. Records every call so tests can check what was asked.
    """

    def __init__(self, outcomes):
        self._outcomes = list(outcomes)
        self.calls = []
        self.closed = False

    def get(self, url, params=None, timeout=None):
        self.calls.append({"url": url, "params": dict(params or {}), "timeout": timeout})
        if not self._outcomes:
            raise AssertionError(f"unexpected extra request: {url} {params}")
        outcome = self._outcomes.pop(0)
        if isinstance(outcome, BaseException):
            raise outcome
        return outcome

    def close(self):
        self.closed = True

    @property
    def cursors(self):
        return [c["params"].get("cursor") for c in self.calls]


def page(items, cursor=None):
    return _StubResponse(200, {"data": items, "nextPageCursor": cursor})


def status(code):
    return _StubResponse(code, {"errors": [{"code": 0, "message": "nope"}]})


def bad_json():
    return _StubResponse(200, bad_json=True)


def connection_error():
    return requests.ConnectionError("connection refused")


def item(asset_id, creator_id):
    return {"assetId": asset_id, "creatorId": creator_id, "name": f"Pass {asset_id}"}


@pytest.fixture()
def settings():
    return Settings(
        inventory_url="https://inventory.test/v2/users/{user_id}/inventory",
        request_timeout_s=2.5,
    )


@pytest.fixture()
def stub_upstream(monkeypatch):
    """
    Route the fetcher's own session through a StubSession; call it with the
    scripted outcomes and it returns the stub.
    """
    from gamepass_relay.upstream import inventory

    def install(*outcomes):
        stub = StubSession(outcomes)
        monkeypatch.setattr(inventory, "get_session", lambda: stub)
        return stub

    return install
