"""HTTP client for the GovInfo Congressional Record (CREC) collection."""

from __future__ import annotations

from typing import Any, Dict, List, Literal, Optional
import logging

import httpx

from ..core.types import Chamber, GovInfoPackage

LOGGER = logging.getLogger(__name__)

DownloadFormat = Literal["html", "pdf", "xml"]


class GovInfoClientError(RuntimeError):
    """Raised when the GovInfo API responds with an error."""


class TranscriptNotFoundError(GovInfoClientError):
    """Raised when a package has no transcript for the requested chamber."""


class GovInfoClient:
    """Minimal client for listing and downloading Congressional Record packages."""

    def __init__(
        self,
        base_url: str,
        api_key: Optional[str],
        *,
        content_url: str = "https://www.govinfo.gov/content/pkg",
        timeout: float = 30.0,
        max_retries: int = 3,
        page_size: int = 100,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._content_url = content_url.rstrip("/")
        self._api_key = api_key
        self._max_retries = max(1, max_retries)
        self._page_size = page_size
        self._client = httpx.Client(timeout=timeout, follow_redirects=True)
        if not api_key:
            LOGGER.warning("GovInfo API key not configured - collection requests will likely be rejected")

    # --- public API -----------------------------------------------------
    def list_packages(
        self,
        from_date: str,
        to_date: Optional[str] = None,
        *,
        page_size: Optional[int] = None,
    ) -> List[GovInfoPackage]:
        """Return the CREC packages published between ``from_date`` and ``to_date``."""

        path = f"/collections/CREC/{from_date}T00:00:00Z"
        if to_date:
            path += f"/{to_date}T23:59:59Z"
        params = {"pageSize": str(page_size or self._page_size), "offsetMark": "*"}
        data = self._request_json("GET", f"{self._base_url}{path}", params=params)
        return [self._parse_package(entry) for entry in data.get("packages") or []]

    def has_transcript_for_date(self, date: str) -> bool:
        return bool(self.list_packages(date, date, page_size=1))

    def fetch_transcript_html(self, package_id: str, chamber: Chamber) -> str:
        """Download the raw HTML of one chamber section of ``package_id``."""

        url = self.transcript_html_url(package_id, chamber)
        try:
            response = self._request("GET", url, authenticated=False)
        except GovInfoClientError as exc:
            cause = exc.__cause__
            if isinstance(cause, httpx.HTTPStatusError) and cause.response.status_code == 404:
                raise TranscriptNotFoundError(f"Transcript not found for {package_id} {chamber}") from cause
            raise
        return response.text

    def transcript_html_url(self, package_id: str, chamber: Chamber) -> str:
        return f"{self._content_url}/{package_id}/html/{package_id}-{chamber}.htm"

    def package_download_url(self, package_id: str, fmt: DownloadFormat = "html") -> str:
        return f"{self._content_url}/{package_id}/{fmt}/{package_id}.{fmt}"

    @staticmethod
    def record_page_url(page_number: str) -> str:
        """Congress.gov search link for a page marker such as ``S7945``."""

        chamber = "senate" if page_number.startswith("S") else "house"
        return (
            "https://www.congress.gov/congressional-record/search"
            f"?pageSort=relevancy&pageNumber={page_number}&chamber={chamber}"
        )

    def close(self) -> None:
        """Close the underlying HTTP client."""

        self._client.close()

    def __enter__(self) -> "GovInfoClient":  # pragma: no cover - trivial
        return self

    def __exit__(self, exc_type, exc, tb) -> None:  # pragma: no cover - trivial
        self.close()

    # --- helpers --------------------------------------------------------
    def _request_json(self, method: str, url: str, params: Optional[Dict[str, str]] = None) -> Dict[str, Any]:
        return self._request(method, url, params=params).json()

    def _request(
        self,
        method: str,
        url: str,
        params: Optional[Dict[str, str]] = None,
        *,
        authenticated: bool = True,
    ) -> httpx.Response:
        query = dict(params or {})
        if authenticated and self._api_key:
            query["api_key"] = self._api_key
        last_exc: Optional[Exception] = None
        error_message: Optional[str] = None
        for attempt in range(1, self._max_retries + 1):
            try:
                response = self._client.request(method, url, params=query or None)
                response.raise_for_status()
                return response
            except httpx.HTTPStatusError as exc:  # pragma: no cover - network errors are rare in tests
                last_exc = exc
                status = exc.response.status_code
                LOGGER.warning(
                    "GovInfo returned status %s for %s %s (attempt %s/%s)",
                    status,
                    method,
                    url,
                    attempt,
                    self._max_retries,
                )
                if status in (401, 403):
                    error_message = (
                        f"GovInfo rejected the request with status {status}. "
                        "Please configure a valid api.data.gov key."
                    )
                    break
                if status == 404:
                    error_message = f"GovInfo resource {url} does not exist"
                    break
                if status == 429:
                    error_message = "GovInfo rate limit reached (status 429). Please wait and try again."
                else:
                    error_message = f"GovInfo rejected the request with status {status}"
            except httpx.HTTPError as exc:  # pragma: no cover - network errors are rare in tests
                last_exc = exc
                LOGGER.warning("HTTP error while requesting %s %s: %s", method, url, exc)
        if error_message:
            raise GovInfoClientError(error_message) from last_exc
        raise GovInfoClientError(f"Failed to request {url}") from last_exc

    @staticmethod
    def _parse_package(data: Dict[str, Any]) -> GovInfoPackage:
        package_id = data.get("packageId")
        if not package_id:
            raise GovInfoClientError("Package entry did not contain a packageId")

        congress: Optional[int]
        try:
            congress = int(data["congress"]) if data.get("congress") else None
        except (TypeError, ValueError):
            congress = None

        return GovInfoPackage(
            package_id=str(package_id),
            last_modified=data.get("lastModified"),
            package_link=data.get("packageLink"),
            doc_class=data.get("docClass"),
            title=data.get("title"),
            congress=congress,
            date_issued=data.get("dateIssued"),
            source=data,
        )


__all__ = ["GovInfoClient", "GovInfoClientError", "TranscriptNotFoundError"]
