"""
Test the API client and its query cache.
"""

import pytest

from medivault.client import (
    DOCUMENTS_STALE_TIME,
    LoginRedirect,
    MediVaultClient,
    QueryCache,
    UnauthorizedError,
    ApiError,
    make_key,
)
from medivault.core.config import get_settings

SAMPLE_PDF = b"%PDF-1.4\n%%EOF\n"


class FakeClock:
    def __init__(self):
        self.now = 1000.0

    def __call__(self):
        return self.now


class RecordingHttp:
    """Wraps a TestClient and records every request made through it."""

    def __init__(self, inner):
        self.inner = inner
        self.calls = []

    def request(self, method, url, **kwargs):
        self.calls.append((method, url.replace("http://testserver", "")))
        return self.inner.request(method, url, **kwargs)

    def gets(self, path):
        return sum(1 for method, url in self.calls if method == "GET" and url == path)


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def http(auth_client):
    return RecordingHttp(auth_client)


@pytest.fixture
def api(http, clock):
    return MediVaultClient(
        base_url="http://testserver", http=http, cache=QueryCache(clock=clock)
    )


# ============================================================
# QUERY CACHE
# ============================================================


def test_make_key_ignores_none_and_order():
    assert make_key("/api/documents", {"limit": None}) == make_key("/api/documents")
    assert make_key("/x", {"a": 1, "b": 2}) == make_key("/x", {"b": 2, "a": 1})
    assert make_key("/x", {"a": 1}) != make_key("/x", {"a": 2})


def test_cache_entry_goes_stale(clock):
    cache = QueryCache(clock=clock)
    key = make_key("/api/documents")
    cache.set(key, ["doc"], stale_time=60)

    assert cache.get(key) == ["doc"]
    clock.now += 59
    assert cache.is_fresh(key)
    clock.now += 1
    assert cache.get(key) is None


def test_zero_stale_time_always_refetches(clock):
    cache = QueryCache(clock=clock)
    calls = []
    key = make_key("/api/symptoms")
    cache.get_or_fetch(key, lambda: calls.append(1) or [], stale_time=0)
    cache.get_or_fetch(key, lambda: calls.append(1) or [], stale_time=0)
    assert len(calls) == 2


def test_invalidate_drops_endpoint_and_nested_keys(clock):
    cache = QueryCache(clock=clock)
    cache.set(make_key("/api/documents"), [], 300)
    cache.set(make_key("/api/documents", {"limit": 5}), [], 300)
    cache.set(make_key("/api/documents/search", {"q": "x"}), [], 300)
    cache.set(make_key("/api/documents-archive"), [], 300)
    cache.set(make_key("/api/symptoms"), [], 300)

    assert cache.invalidate("/api/documents") == 3
    assert make_key("/api/symptoms") in cache
    assert make_key("/api/documents-archive") in cache
    assert len(cache) == 2


# ============================================================
# CLIENT
# ============================================================


def upload(api, **overrides):
    fields = dict(
        file=SAMPLE_PDF,
        filename="sample.pdf",
        mime_type="application/pdf",
        title="Blood Panel",
        document_type="lab_result",
        document_date="2024-01-10",
    )
    fields.update(overrides)
    return api.upload_document(**fields)


def test_document_list_cached_for_five_minutes(api, http, clock):
    assert DOCUMENTS_STALE_TIME == 300
    api.list_documents()
    api.list_documents()
    assert http.gets("/api/documents") == 1

    clock.now += DOCUMENTS_STALE_TIME
    api.list_documents()
    assert http.gets("/api/documents") == 2


def test_upload_invalidates_document_list(api, http):
    assert api.list_documents() == []

    created = upload(api, tags=["x", "y"])
    assert created["tags"] == ["x", "y"]

    listed = api.list_documents()
    assert [d["id"] for d in listed] == [created["id"]]
    assert http.gets("/api/documents") == 2


def test_delete_invalidates_document_list(api):
    created = upload(api)
    assert len(api.list_documents()) == 1

    assert api.delete_document(created["id"]) == {"message": "Document deleted successfully"}
    assert api.list_documents() == []


def test_download_file(api):
    created = upload(api)
    filename = created["filePath"].replace("\\", "/").rsplit("/", 1)[-1]
    assert api.download_file(filename) == SAMPLE_PDF


def test_symptom_mutations_invalidate_list(api):
    api.default_stale_time = 300
    assert api.list_symptoms() == []

    created = api.create_symptom(
        {"symptomName": "Headache", "severity": 4, "dateRecorded": "2024-02-01"}
    )
    assert [s["id"] for s in api.list_symptoms()] == [created["id"]]

    api.update_symptom(created["id"], {"severity": 7})
    assert api.list_symptoms()[0]["severity"] == 7

    api.delete_symptom(created["id"])
    assert api.list_symptoms() == []


def test_search_and_filters(api):
    upload(api, title="Checkup", doctor_name="Dr. Okafor", document_type="consultation")
    upload(api, title="Scan", document_type="x_ray")

    assert [d["title"] for d in api.search_documents("okafor")] == ["Checkup"]
    assert [d["title"] for d in api.list_documents_by_type("x_ray")] == ["Scan"]


def test_not_found_raises_api_error(api):
    with pytest.raises(ApiError) as excinfo:
        api.get_document(12345)
    assert excinfo.value.status_code == 404
    assert excinfo.value.message == "Document not found"


def test_unauthorized_triggers_login_redirect(client):
    redirects = []
    handler = LoginRedirect(
        login_url="/api/login", delay=0.5, redirect=redirects.append, sleep=lambda s: None
    )
    anonymous = MediVaultClient(
        base_url="http://testserver", http=client, on_unauthorized=handler
    )

    with pytest.raises(UnauthorizedError):
        anonymous.list_documents()
    with pytest.raises(UnauthorizedError):
        anonymous.create_symptom({"symptomName": "x", "severity": 1, "dateRecorded": "2024-01-01"})

    assert redirects == ["/api/login", "/api/login"]


def test_default_login_redirect_uses_configured_login_url(monkeypatch):
    """Test the default 401 handler points at the configured login URL."""
    monkeypatch.setattr(get_settings(), "login_url", "/auth/sign-in")
    api = MediVaultClient(base_url="http://example.test/")

    assert api.on_unauthorized.login_url == "http://example.test/auth/sign-in"
    assert LoginRedirect().login_url == "/auth/sign-in"
