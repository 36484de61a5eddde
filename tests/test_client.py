import pytest
import requests

from calculator.client import RemoteCalculator
from calculator.errors import InvalidInput, TransportError, UnknownInstrument
from calculator.service import RiskRequest, calculate_position_size


class AppSession:
    """Routes the requests-style post() into the app in-process."""

    def __init__(self, client):
        self.client = client
        self.calls = []

    def post(self, url, json=None, timeout=None):
        self.calls.append((url, json, timeout))
        return self.client.post(url.replace("http://calc.local", ""), json=json)


class FakeResponse:
    def __init__(self, status_code, body=None):
        self.status_code = status_code
        self._body = body

    def json(self):
        if self._body is None:
            raise ValueError("No JSON object could be decoded")
        return self._body


class StaticSession:
    def __init__(self, response=None, error=None):
        self.response = response
        self.error = error

    def post(self, url, json=None, timeout=None):
        if self.error:
            raise self.error
        return self.response


@pytest.fixture
def remote(client):
    return RemoteCalculator("http://calc.local/", timeout=2, session=AppSession(client))


@pytest.mark.parametrize(
    "request_",
    [
        RiskRequest("EURUSD", 10000, 1, 50),
        RiskRequest("EURUSD", 10000, 1, 0),
        RiskRequest("USDJPY", 2500.5, 0.7, 17.3),
        RiskRequest("XAUUSD", 100000, 1.5, 320),
    ],
)
def test_remote_matches_local(remote, table, request_):
    assert remote.calculate(request_) == calculate_position_size(request_, table)


def test_remote_sends_one_request(remote):
    remote.calculate(RiskRequest("EURUSD", 10000, 1, 50))

    assert remote.session.calls == [
        (
            "http://calc.local/api/lot-size",
            {"symbol": "EURUSD", "account_balance": 10000, "risk_percent": 1, "stop_loss_pips": 50},
            2,
        )
    ]


def test_remote_invalid_input(remote):
    with pytest.raises(InvalidInput) as exc:
        remote.calculate(RiskRequest("EURUSD", 10000, 1, -5))

    assert exc.value.field == "stop_loss_pips"


def test_remote_unknown_instrument(remote):
    with pytest.raises(UnknownInstrument) as exc:
        remote.calculate(RiskRequest("BTCUSD", 10000, 1, 50))

    assert exc.value.symbol == "BTCUSD"


@pytest.mark.parametrize("error", [requests.Timeout("slow"), requests.ConnectionError("refused")])
def test_transport_failures(error):
    remote = RemoteCalculator("http://calc.local", session=StaticSession(error=error))

    with pytest.raises(TransportError) as exc:
        remote.calculate(RiskRequest("EURUSD", 10000, 1, 50))

    assert not isinstance(exc.value, ValueError)


@pytest.mark.parametrize("status", [500, 502, 404])
def test_non_2xx_is_transport_error(status):
    remote = RemoteCalculator("http://calc.local", session=StaticSession(FakeResponse(status, {"detail": "boom"})))

    with pytest.raises(TransportError) as exc:
        remote.calculate(RiskRequest("EURUSD", 10000, 1, 50))

    assert exc.value.status_code == status


def test_untyped_400_is_transport_error():
    remote = RemoteCalculator("http://calc.local", session=StaticSession(FakeResponse(400, {"detail": "Bad request"})))

    with pytest.raises(TransportError):
        remote.calculate(RiskRequest("EURUSD", 10000, 1, 50))


@pytest.mark.parametrize("body", [None, {"lot_size": 0.2}])
def test_malformed_body_is_transport_error(body):
    remote = RemoteCalculator("http://calc.local", session=StaticSession(FakeResponse(200, body)))

    with pytest.raises(TransportError):
        remote.calculate(RiskRequest("EURUSD", 10000, 1, 50))


def test_settings_are_used_by_default():
    remote = RemoteCalculator(session=StaticSession())

    assert remote.url == "http://127.0.0.1:8000/api/lot-size"
    assert remote.timeout == 5


@pytest.mark.parametrize("bad", ["50", None, True])
def test_remote_rejects_what_local_rejects(remote, table, bad):
    request = RiskRequest("EURUSD", 10000, 1, bad)

    with pytest.raises(InvalidInput) as local_exc:
        calculate_position_size(request, table)
    with pytest.raises(InvalidInput) as remote_exc:
        remote.calculate(request)

    assert remote_exc.value.field == local_exc.value.field == "stop_loss_pips"
    assert str(remote_exc.value) == str(local_exc.value)


def test_remote_overflowing_stop_loss_is_invalid_input(remote):
    with pytest.raises(InvalidInput) as exc:
        remote.calculate(RiskRequest("EURUSD", 10000, 1, 5e-324))

    assert exc.value.field == "stop_loss_pips"


def good_body(**overrides):
    body = {
        "symbol": "EURUSD",
        "lot_size": 0.2,
        "risk_amount": 100.0,
        "pip_value_per_lot": 10.0,
        "mini_lots": 2.0,
        "micro_lots": 20.0,
        "units": 20000.0,
        "pip_value_for_size": 2.0,
        "potential_loss": 100.0,
    }
    body.update(overrides)
    return body


def test_well_formed_body_is_accepted():
    remote = RemoteCalculator("http://calc.local", session=StaticSession(FakeResponse(200, good_body())))

    result = remote.calculate(RiskRequest("EURUSD", 10000, 1, 50))

    assert result.lot_size == 0.2
    assert result.units == 20000.0


@pytest.mark.parametrize(
    "body",
    [
        good_body(lot_size=None),
        good_body(units="20000"),
        good_body(potential_loss=float("inf")),
        good_body(symbol=None),
        [good_body()],
    ],
)
def test_wrongly_typed_body_is_transport_error(body):
    remote = RemoteCalculator("http://calc.local", session=StaticSession(FakeResponse(200, body)))

    with pytest.raises(TransportError):
        remote.calculate(RiskRequest("EURUSD", 10000, 1, 50))


def test_non_object_400_body_is_transport_error():
    remote = RemoteCalculator("http://calc.local", session=StaticSession(FakeResponse(400, ["bad"])))

    with pytest.raises(TransportError):
        remote.calculate(RiskRequest("EURUSD", 10000, 1, 50))
