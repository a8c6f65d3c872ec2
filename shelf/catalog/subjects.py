"""
Subject lookup: fetch a subject listing from Open Library and pluck the titles.

Records without a string `title` are skipped rather than replaced by a
placeholder, so every returned title came from the remote payload.
"""
from __future__ import annotations

from collections.abc import Mapping
from typing import Any, List, Optional, Sequence

from .openlibrary_client import OpenLibraryClient, OpenLibrarySettings, SubjectFetch


def fetch_subject(
    subject: str,
    settings: Optional[OpenLibrarySettings] = None,
) -> SubjectFetch:
    """
    Fetch a subject and keep track of whether the call degraded.

    Raises:
        ValueError: if `subject` is empty or not a string.
    """
    with OpenLibraryClient(settings=settings) as client:
        return client.get_subject(subject)


def fetch_subject_data(
    subject: str,
    settings: Optional[OpenLibrarySettings] = None,
) -> dict:
    """Return the decoded subject payload, or {} if the fetch failed."""
    return fetch_subject(subject, settings=settings).payload


def _works_of(response: Any) -> Optional[Sequence[Any]]:
    if not isinstance(response, Mapping):
        return None
    works = response.get("works")
    if not isinstance(works, (list, tuple)):
        return None
    return works


def _title_of(work: Any) -> Optional[str]:
    if not isinstance(work, Mapping):
        return None
    title = work.get("title")
    if not isinstance(title, str):
        return None
    return title


def extract_titles(response: Any) -> List[str]:
    """
    Return the titles of `response["works"]` in remote order.

    Duplicates are kept. Works without a string title are omitted. A missing
    or malformed `works` field yields an empty list.
    """
    works = _works_of(response)
    if works is None:
        return []

    out: List[str] = []
    for work in works:
        title = _title_of(work)
        if title is None:
            continue
        out.append(title)
    return out


def get_titles_by_subject(
    subject: str,
    settings: Optional[OpenLibrarySettings] = None,
) -> List[str]:
    """
    Titles listed under `subject`, or [] when the lookup fails.

    Network and remote errors are logged by the client and never raised here.
    """
    return extract_titles(fetch_subject_data(subject, settings=settings))


if __name__ == "__main__":
    # Quick manual test (hits the live API)
    import sys

    from shelf.log import setup_logger

    setup_logger()
    subject = sys.argv[1] if len(sys.argv) > 1 else "fiction"
    titles = get_titles_by_subject(subject)
    print(f"{len(titles)} titles for {subject!r}")
    for t in titles:
        print("-", t)
