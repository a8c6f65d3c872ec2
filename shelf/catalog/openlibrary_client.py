# shelf/catalog/openlibrary_client.py
"""
Open Library client wrapper for subject lookups.

This module centralizes all interactions with the Open Library HTTP API:
- settings (endpoint template, user agent) loaded from the environment
- a single GET per subject, decoded into a plain dict

Failures never escape `get_subject`: they come back as a degraded
`SubjectFetch` with an empty payload and the error message attached.

Environment variables:
    OPEN_LIBRARY_SUBJECT_URL  - optional, default: https://openlibrary.org/subjects/{subject}.json
    OPEN_LIBRARY_USER_AGENT   - optional, default: shelf/0.1 (+https://openlibrary.org)
"""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

import httpx
from dotenv import load_dotenv

__all__ = ["OpenLibrarySettings", "OpenLibraryClient", "SubjectFetch"]

logger = logging.getLogger(__name__)

DEFAULT_SUBJECT_URL = "https://openlibrary.org/subjects/{subject}.json"
DEFAULT_USER_AGENT = "shelf/0.1 (+https://openlibrary.org)"


@dataclass
class OpenLibrarySettings:
    """Typed configuration for Open Library access."""
    subject_url: str = DEFAULT_SUBJECT_URL
    user_agent: str = DEFAULT_USER_AGENT

    @classmethod
    def from_env(cls) -> "OpenLibrarySettings":
        """
        Load settings from environment (.env supported).

        Raises:
            RuntimeError: if OPEN_LIBRARY_SUBJECT_URL has no {subject} placeholder.
        """
        load_dotenv(override=False)
        subject_url = os.getenv("OPEN_LIBRARY_SUBJECT_URL") or DEFAULT_SUBJECT_URL
        if "{subject}" not in subject_url:
            raise RuntimeError(
                "OPEN_LIBRARY_SUBJECT_URL must contain a '{subject}' placeholder."
            )
        user_agent = os.getenv("OPEN_LIBRARY_USER_AGENT") or DEFAULT_USER_AGENT
        return cls(subject_url=subject_url, user_agent=user_agent)


@dataclass(frozen=True)
class SubjectFetch:
    """
    Outcome of one subject request.

    Either the decoded body (`error` is None) or a degraded result whose
    payload is always an empty dict.
    """
    subject: str
    payload: Dict[str, Any] = field(default_factory=dict)
    error: Optional[str] = None

    @property
    def degraded(self) -> bool:
        return self.error is not None

    @classmethod
    def failed(cls, subject: str, error: str) -> "SubjectFetch":
        return cls(subject=subject, payload={}, error=error)


class OpenLibraryClient:
    """
    Thin wrapper around an `httpx.Client` pointed at Open Library.

    - `subject_url(subject)`: render the endpoint for one subject.
    - `get_subject(subject)`: one GET, returned as a `SubjectFetch`.

    Exactly one attempt per call; no retries.
    """

    def __init__(
        self,
        settings: Optional[OpenLibrarySettings] = None,
        http: Optional[httpx.Client] = None,
    ) -> None:
        self.settings = settings or OpenLibrarySettings.from_env()
        self._owns_http = http is None
        self.http = http or httpx.Client(
            headers={"User-Agent": self.settings.user_agent, "Accept": "application/json"},
            follow_redirects=True,
        )

    def __enter__(self) -> "OpenLibraryClient":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def close(self) -> None:
        if self._owns_http:
            self.http.close()

    def subject_url(self, subject: str) -> str:
        if not isinstance(subject, str) or not subject:
            raise ValueError("subject must be a non-empty string")
        return self.settings.subject_url.format(subject=subject)

    def get_subject(self, subject: str) -> SubjectFetch:
        """
        Fetch the raw subject payload.

        Args:
            subject: Subject key, already escaped for a URL path segment.

        Returns:
            SubjectFetch with the decoded JSON object, or a degraded one on any
            transport error, non-2xx status, undecodable body or a subject
            httpx cannot turn into a URL.

        Raises:
            ValueError: if `subject` is empty or not a string.
        """
        url = self.subject_url(subject)
        try:
            resp = self.http.get(url)
            resp.raise_for_status()
            data = resp.json()
        except (httpx.HTTPError, httpx.InvalidURL, ValueError) as e:
            # InvalidURL: over-long or non-printable subject; ValueError: json.JSONDecodeError
            logger.error("Error getting books for subject %r: %s", subject, e, exc_info=True)
            return SubjectFetch.failed(subject, str(e))

        if not isinstance(data, dict):
            logger.error(
                "Error getting books for subject %r: expected a JSON object, got %s",
                subject,
                type(data).__name__,
            )
            return SubjectFetch.failed(subject, f"unexpected payload type: {type(data).__name__}")

        logger.debug("Fetched subject %r from %s", subject, url)
        return SubjectFetch(subject=subject, payload=data)


if __name__ == "__main__":
    # Non-network sanity check: just load settings.
    try:
        s = OpenLibrarySettings.from_env()
        print("Loaded Open Library settings OK.")
        print("Subject URL:", s.subject_url)
        print("User agent:", s.user_agent)
    except Exception as e:
        print("Settings error:", e)
