import httpx
import pytest

from conftest import API_KEY
from subway_bot.errors import NetworkError
from subway_bot.http_client import HttpClient


def _client(settings, handler):
    return HttpClient(settings, transport=httpx.MockTransport(handler))


def test_returns_body_text(settings):
    calls = []

    def handler(request):
        calls.append(request)
        return httpx.Response(200, text='{"ok": true}')

    client = _client(settings, handler)
    try:
        assert client.get("http://example.test/data") == '{"ok": true}'
    finally:
        client.close()

    assert len(calls) == 1
    assert calls[0].method == "GET"


def test_timeouts_come_from_settings(settings):
    client = _client(settings, lambda request: httpx.Response(200))
    try:
        assert client.timeout.connect == 2.0
        assert client.timeout.read == 3.0
    finally:
        client.close()


@pytest.mark.parametrize("status", [400, 404, 500, 503])
def test_non_success_status_raises_network_error(settings, status):
    url = f"http://example.test/{API_KEY}/json"
    client = _client(settings, lambda request: httpx.Response(status, text="nope"))
    try:
        with pytest.raises(NetworkError) as excinfo:
            client.get(url)
    finally:
        client.close()

    assert excinfo.value.status_code == status
    assert excinfo.value.url == url
    assert API_KEY not in str(excinfo.value)


@pytest.mark.parametrize(
    "error",
    [
        httpx.ConnectError("connection refused"),
        httpx.ConnectTimeout("connect timed out"),
        httpx.ReadTimeout("read timed out"),
        httpx.UnsupportedProtocol("unsupported protocol 'ftp://'"),
    ],
)
def test_transport_failures_raise_network_error(settings, error):
    def handler(request):
        raise error

    client = _client(settings, handler)
    try:
        with pytest.raises(NetworkError) as excinfo:
            client.get("http://example.test/data")
    finally:
        client.close()

    assert excinfo.value.__cause__ is error
    assert excinfo.value.status_code is None


def test_keyboard_interrupt_is_not_swallowed(settings):
    def handler(request):
        raise KeyboardInterrupt

    client = _client(settings, handler)
    try:
        with pytest.raises(KeyboardInterrupt):
            client.get("http://example.test/data")
    finally:
        client.close()
