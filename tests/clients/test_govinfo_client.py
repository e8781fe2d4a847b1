import httpx
import pytest

from floorwatch.clients import GovInfoClient, GovInfoClientError, TranscriptNotFoundError


class DummyClient(GovInfoClient):
    def __init__(self, handler=None, max_retries=3):
        super().__init__(base_url="https://api.example.invalid", api_key="KEY", max_retries=max_retries)
        if handler is not None:
            self._client = httpx.Client(transport=httpx.MockTransport(handler))


def test_list_packages_builds_collection_url(monkeypatch):
    client = DummyClient()
    captured = []

    def fake_request_json(method, url, params=None):
        captured.append((url, params))
        return {
            "packages": [
                {"packageId": "CREC-2025-01-15", "dateIssued": "2025-01-15", "congress": "119", "docClass": "CREC"},
            ]
        }

    monkeypatch.setattr(client, "_request_json", fake_request_json)

    packages = client.list_packages("2025-01-15", "2025-01-16")

    assert captured == [
        (
            "https://api.example.invalid/collections/CREC/2025-01-15T00:00:00Z/2025-01-16T23:59:59Z",
            {"pageSize": "100", "offsetMark": "*"},
        )
    ]
    assert packages[0].package_id == "CREC-2025-01-15"
    assert packages[0].congress == 119
    assert packages[0].date_issued == "2025-01-15"


def test_has_transcript_for_date(monkeypatch):
    client = DummyClient()
    monkeypatch.setattr(client, "_request_json", lambda method, url, params=None: {"packages": []})

    assert client.has_transcript_for_date("2025-01-18") is False


def test_api_key_is_sent_as_query_parameter():
    seen = []

    def handler(request):
        seen.append(request.url)
        return httpx.Response(200, json={"packages": []})

    client = DummyClient(handler)

    assert client.list_packages("2025-01-15") == []
    assert seen[0].params["api_key"] == "KEY"
    assert seen[0].path.startswith("/collections/CREC/2025-01-15T00")


def test_fetch_transcript_html_returns_text_without_api_key():
    seen = []

    def handler(request):
        seen.append(request.url)
        return httpx.Response(200, text="<pre>  Mr. WALBERG. Hello.</pre>")

    client = DummyClient(handler)

    html = client.fetch_transcript_html("CREC-2025-01-15", "house")

    assert html == "<pre>  Mr. WALBERG. Hello.</pre>"
    assert str(seen[0]).startswith("https://www.govinfo.gov/content/pkg/CREC-2025-01-15/html/CREC-2025-01-15-house.htm")
    assert "api_key" not in seen[0].params


def test_missing_transcript_raises_not_found():
    client = DummyClient(lambda request: httpx.Response(404))

    with pytest.raises(TranscriptNotFoundError):
        client.fetch_transcript_html("CREC-2025-01-15", "senate")


def test_server_errors_are_retried_then_raised():
    calls = []

    def handler(request):
        calls.append(request)
        return httpx.Response(503)

    client = DummyClient(handler, max_retries=3)

    with pytest.raises(GovInfoClientError) as excinfo:
        client.list_packages("2025-01-15")
    assert not isinstance(excinfo.value, TranscriptNotFoundError)
    assert len(calls) == 3


def test_urls():
    client = DummyClient()

    assert client.transcript_html_url("CREC-2025-01-15", "senate") == (
        "https://www.govinfo.gov/content/pkg/CREC-2025-01-15/html/CREC-2025-01-15-senate.htm"
    )
    assert client.package_download_url("CREC-2025-01-15", "pdf") == (
        "https://www.govinfo.gov/content/pkg/CREC-2025-01-15/pdf/CREC-2025-01-15.pdf"
    )
    assert "pageNumber=S7945&chamber=senate" in GovInfoClient.record_page_url("S7945")
    assert GovInfoClient.record_page_url("H1234").endswith("chamber=house")


def test_parse_package_requires_identifier():
    with pytest.raises(GovInfoClientError):
        GovInfoClient._parse_package({})
