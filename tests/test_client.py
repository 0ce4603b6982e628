"""HomecareAPI client, with the HTTP session stubbed out."""

import pytest
import requests

from homecare_client import HomecareAPI


class FakeResponse:
    def __init__(self, status_code=200, payload=None, text=""):
        self.status_code = status_code
        self._payload = payload
        self.text = text
        self.content = b"" if payload is None and not text else b"x"

    def json(self):
        if self._payload is None:
            raise ValueError("No JSON body")
        return self._payload

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Error", response=self)


class FakeSession:
    def __init__(self, response=None, exc=None):
        self.response = response
        self.exc = exc
        self.calls = []

    def request(self, **kwargs):
        self.calls.append(kwargs)
        if self.exc is not None:
            raise self.exc
        return self.response


def make_api(response=None, exc=None):
    session = FakeSession(response, exc)
    return HomecareAPI(base_url="http://testserver/", timeout=3, session=session), session


def test_list_bookings_sends_scoping_params():
    api, session = make_api(FakeResponse(payload=[{"id": 1}]))
    data, error = api.list_bookings(role="customer", user_id=1)
    assert error is None
    assert data == [{"id": 1}]
    call = session.calls[0]
    assert call["method"] == "GET"
    assert call["url"] == "http://testserver/api/bookings"
    assert call["params"] == {"role": "customer", "userId": 1}
    assert call["timeout"] == 3


def test_none_params_are_dropped():
    api, session = make_api(FakeResponse(payload=[]))
    api.list_bookings()
    assert session.calls[0]["params"] is None


def test_set_booking_status_patches():
    api, session = make_api(FakeResponse(payload={"id": 4, "status": "confirmed"}))
    data, error = api.set_booking_status(4, "confirmed")
    assert error is None
    assert data["status"] == "confirmed"
    assert session.calls[0]["method"] == "PATCH"
    assert session.calls[0]["url"].endswith("/api/bookings/4")
    assert session.calls[0]["json"] == {"status": "confirmed"}


def test_validation_error_carries_field():
    api, _ = make_api(FakeResponse(400, {"message": "Field required", "field": "customerId"}))
    data, error = api.create_booking({"serviceId": 1})
    assert data is None
    assert error == {"status_code": 400, "message": "Field required", "field": "customerId"}


def test_list_error_returns_empty_list():
    api, _ = make_api(FakeResponse(400, {"message": "Input should be 'customer', 'provider' or 'admin'", "field": "role"}))
    data, error = api.list_bookings(role="janitor")
    assert data == []
    assert error["field"] == "role"


def test_non_json_error_body():
    api, _ = make_api(FakeResponse(502, text="Bad Gateway"))
    data, error = api.dashboard_stats()
    assert data is None
    assert error == {"status_code": 502, "message": "Bad Gateway"}


@pytest.mark.parametrize("exc", [requests.ConnectionError("refused"), requests.Timeout("slow")])
def test_network_failures_are_reported(exc):
    api, _ = make_api(exc=exc)
    data, error = api.current_user()
    assert data is None
    assert error["status_code"] is None
    assert error["message"]
