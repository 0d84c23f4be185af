import httpx
import pytest

from floorlog.clients import FloorLogClient, FloorLogClientError


def _client(handler, **kwargs):
    return FloorLogClient(
        "https://example.invalid/pdcl/",
        transport=httpx.MockTransport(handler),
        clock=lambda: 1709485200.5,
        **kwargs,
    )


def test_fetch_adds_cache_breaking_parameter():
    seen = []

    def handler(request):
        seen.append(request)
        return httpx.Response(200, text="<p>SENATE FLOOR PROCEEDINGS</p>")

    client = _client(handler, user_agent="floorlog-test")

    assert client.fetch() == "<p>SENATE FLOOR PROCEEDINGS</p>"
    assert seen[0].url.params["break_cache"] == "1709485200"
    assert seen[0].headers["User-Agent"] == "floorlog-test"
    client.close()


def test_fetch_without_cache_breaking():
    seen = []

    def handler(request):
        seen.append(request)
        return httpx.Response(200, text="ok")

    client = _client(handler, break_cache=False)
    client.fetch()

    assert "break_cache" not in seen[0].url.params
    client.close()


@pytest.mark.parametrize(
    "error",
    [
        httpx.ConnectTimeout("timed out"),
        httpx.ConnectError("connection reset"),
        httpx.ReadError("unreachable"),
    ],
)
def test_network_errors_become_client_errors(error):
    def handler(request):
        raise error

    client = _client(handler)
    with pytest.raises(FloorLogClientError):
        client.fetch()
    client.close()


def test_error_status_becomes_client_error():
    client = _client(lambda request: httpx.Response(503, text="maintenance"))

    with pytest.raises(FloorLogClientError, match="503"):
        client.fetch()
    client.close()
