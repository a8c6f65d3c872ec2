import pytest

from shelf.catalog import openlibrary_client
from shelf.catalog.openlibrary_client import OpenLibrarySettings


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for var in ("OPEN_LIBRARY_SUBJECT_URL", "OPEN_LIBRARY_USER_AGENT", "SHELF_LOG_LEVEL"):
        monkeypatch.delenv(var, raising=False)
    # a developer's .env would write straight into os.environ
    monkeypatch.setattr(openlibrary_client, "load_dotenv", lambda **kwargs: False)


@pytest.fixture
def settings():
    return OpenLibrarySettings()


@pytest.fixture
def fiction_payload():
    return {
        "key": "/subjects/fiction",
        "name": "fiction",
        "work_count": 3,
        "works": [
            {"key": "/works/OL1W", "title": "Pride and Prejudice"},
            {"key": "/works/OL2W", "title": "Moby Dick"},
            {"key": "/works/OL3W", "title": "Pride and Prejudice"},
        ],
    }
