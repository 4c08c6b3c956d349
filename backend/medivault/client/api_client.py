"""
HTTP client for the MediVault API.

Reads go through a ``QueryCache``; every successful mutation invalidates the
matching list endpoint before returning. A 401 from any call is handed to
the ``on_unauthorized`` hook and then raised as ``UnauthorizedError``.
"""

import json
import logging
import time
from datetime import date
from typing import Any, BinaryIO, Callable, Dict, List, Optional, Union

import requests

from medivault.client.cache import QueryCache, make_key
from medivault.core.config import get_settings

logger = logging.getLogger(__name__)

DOCUMENTS_ENDPOINT = "/api/documents"
SYMPTOMS_ENDPOINT = "/api/symptoms"

# Dashboard document list is reused for five minutes
DOCUMENTS_STALE_TIME = 5 * 60


class ApiError(Exception):
    """Non-success response from the API."""

    def __init__(self, status_code: int, message: str):
        super().__init__(f"{status_code}: {message}")
        self.status_code = status_code
        self.message = message


class UnauthorizedError(ApiError):
    pass


class LoginRedirect:
    """
    Default 401 handler.

    Logs a short notice, waits ``delay`` seconds, then calls ``redirect``
    with the login URL, ``Settings.login_url`` unless given (or only logs it
    when no callback is given).
    """

    def __init__(
        self,
        login_url: Optional[str] = None,
        delay: float = 0.5,
        redirect: Optional[Callable[[str], Any]] = None,
        sleep: Callable[[float], Any] = time.sleep,
    ):
        self.login_url = login_url or get_settings().login_url
        self.delay = delay
        self.redirect = redirect
        self.sleep = sleep

    def __call__(self, error: UnauthorizedError) -> None:
        logger.warning("Unauthorized: You are logged out. Logging in again...")
        if self.delay:
            self.sleep(self.delay)
        if self.redirect is not None:
            self.redirect(self.login_url)
        else:
            logger.info(f"Login required: {self.login_url}")


def _error_message(response) -> str:
    try:
        body = response.json()
    except ValueError:
        return response.text or "Request failed"
    if isinstance(body, dict) and body.get("message"):
        return str(body["message"])
    return "Request failed"


class MediVaultClient:
    """Typed access to the MediVault REST endpoints."""

    def __init__(
        self,
        base_url: str = "http://localhost:8000",
        http=None,
        cache: Optional[QueryCache] = None,
        on_unauthorized: Optional[Callable[[UnauthorizedError], Any]] = None,
        default_stale_time: float = 0,
    ):
        """
        Args:
            base_url: Server root, without the ``/api`` prefix
            http: requests-compatible session; a new ``requests.Session`` by default
            cache: Query cache to read through; a private one by default
            on_unauthorized: Called with the error on any 401
            default_stale_time: Seconds a cached read stays fresh, unless the
                endpoint sets its own
        """
        self.base_url = base_url.rstrip("/")
        self.http = http if http is not None else requests.Session()
        self.cache = cache if cache is not None else QueryCache()
        self.on_unauthorized = on_unauthorized or LoginRedirect(
            login_url=f"{self.base_url}{get_settings().login_url}"
        )
        self.default_stale_time = default_stale_time

    # ============================================================
    # PLUMBING
    # ============================================================

    def _request(self, method: str, endpoint: str, **kwargs):
        response = self.http.request(method, f"{self.base_url}{endpoint}", **kwargs)
        if response.status_code == 401:
            error = UnauthorizedError(401, _error_message(response))
            self.on_unauthorized(error)
            raise error
        if response.status_code >= 400:
            raise ApiError(response.status_code, _error_message(response))
        return response

    def _query(
        self,
        endpoint: str,
        params: Optional[Dict[str, Any]] = None,
        stale_time: Optional[float] = None,
    ):
        params = {k: v for k, v in (params or {}).items() if v is not None}
        return self.cache.get_or_fetch(
            make_key(endpoint, params),
            lambda: self._request("GET", endpoint, params=params or None).json(),
            self.default_stale_time if stale_time is None else stale_time,
        )

    def _mutate(self, method: str, endpoint: str, invalidates: str, **kwargs):
        response = self._request(method, endpoint, **kwargs)
        self.cache.invalidate(invalidates)
        return response.json()

    # ============================================================
    # USER
    # ============================================================

    def get_current_user(self) -> Dict[str, Any]:
        return self._query("/api/auth/user")

    # ============================================================
    # DOCUMENTS
    # ============================================================

    def list_documents(self, limit: Optional[int] = None) -> List[Dict[str, Any]]:
        return self._query(
            DOCUMENTS_ENDPOINT, {"limit": limit}, stale_time=DOCUMENTS_STALE_TIME
        )

    def search_documents(self, query: str) -> List[Dict[str, Any]]:
        return self._query(f"{DOCUMENTS_ENDPOINT}/search", {"q": query})

    def list_documents_by_type(self, document_type: str) -> List[Dict[str, Any]]:
        return self._query(f"{DOCUMENTS_ENDPOINT}/type/{document_type}")

    def get_document(self, document_id: int) -> Dict[str, Any]:
        return self._query(f"{DOCUMENTS_ENDPOINT}/{document_id}")

    def upload_document(
        self,
        file: Union[bytes, BinaryIO],
        filename: str,
        mime_type: str,
        title: str,
        document_type: str,
        document_date: Union[str, date],
        description: Optional[str] = None,
        doctor_name: Optional[str] = None,
        facility_name: Optional[str] = None,
        tags: Optional[List[str]] = None,
    ) -> Dict[str, Any]:
        """Upload a file with its metadata as multipart form data."""
        form = {
            "title": title,
            "documentType": document_type,
            "documentDate": str(document_date),
            "description": description,
            "doctorName": doctor_name,
            "facilityName": facility_name,
            "tags": json.dumps(tags or []),
        }
        return self._mutate(
            "POST",
            DOCUMENTS_ENDPOINT,
            invalidates=DOCUMENTS_ENDPOINT,
            data={k: v for k, v in form.items() if v is not None},
            files={"file": (filename, file, mime_type)},
        )

    def delete_document(self, document_id: int) -> Dict[str, Any]:
        return self._mutate(
            "DELETE",
            f"{DOCUMENTS_ENDPOINT}/{document_id}",
            invalidates=DOCUMENTS_ENDPOINT,
        )

    def download_file(self, filename: str) -> bytes:
        """Raw bytes of an uploaded file (never cached)."""
        return self._request("GET", f"/api/files/{filename}").content

    # ============================================================
    # SYMPTOMS
    # ============================================================

    def list_symptoms(self, limit: Optional[int] = None) -> List[Dict[str, Any]]:
        return self._query(SYMPTOMS_ENDPOINT, {"limit": limit})

    def search_symptoms(self, query: str) -> List[Dict[str, Any]]:
        return self._query(f"{SYMPTOMS_ENDPOINT}/search", {"q": query})

    def create_symptom(self, symptom: Dict[str, Any]) -> Dict[str, Any]:
        """Log a symptom; ``symptom`` uses the API's camelCase field names."""
        return self._mutate(
            "POST", SYMPTOMS_ENDPOINT, invalidates=SYMPTOMS_ENDPOINT, json=symptom
        )

    def update_symptom(self, symptom_id: int, updates: Dict[str, Any]) -> Dict[str, Any]:
        return self._mutate(
            "PUT",
            f"{SYMPTOMS_ENDPOINT}/{symptom_id}",
            invalidates=SYMPTOMS_ENDPOINT,
            json=updates,
        )

    def delete_symptom(self, symptom_id: int) -> Dict[str, Any]:
        return self._mutate(
            "DELETE",
            f"{SYMPTOMS_ENDPOINT}/{symptom_id}",
            invalidates=SYMPTOMS_ENDPOINT,
        )
