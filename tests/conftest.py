"""Pytest configuration and fixtures."""

import sys
from pathlib import Path

import pytest
import pytest_asyncio

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))


@pytest.fixture
def members():
    """Three chat members, deliberately unsorted."""
    from calchat.models import Member

    return [Member(id="carol"), Member(id="alice"), Member(id="bob")]


@pytest.fixture
def messages():
    """Messages of two chats, already grouped."""
    from calchat.models import Attachment, Message

    return {
        "alice-bob": [
            Message(id="m1", sender="alice", content="Hi Bob", time="2024-05-01T09:00:00"),
            Message(
                id="m2",
                sender="bob",
                sender_name="Bob",
                content="See attached",
                time="2024-05-01T09:01:00",
                attachments=[Attachment(name="plan.pdf", type="application/pdf", size=2048)],
            ),
        ],
        "alice-carol": [
            Message(id="m3", sender="carol", content="Lunch?", time="2024-05-02T12:00:00"),
        ],
    }


@pytest.fixture
def index_data():
    """Records for building a search index."""
    return {
        "events": [
            {
                "id": "e1",
                "title": "Team meeting",
                "description": "Weekly sync",
                "location": "Room A",
                "category": "meeting",
                "date": "2024-05-01",
            },
            {
                "id": "e2",
                "title": "Birthday party",
                "description": "Cake",
                "location": "Home",
                "category": "birthday",
                "date": "2024-06-10",
            },
        ],
        "messages": {
            "alice-bob": [
                {"id": "m1", "content": "Lunch tomorrow?", "sender_name": "Alice"},
            ],
        },
        "contacts": [
            {
                "id": "c1",
                "name": "Alice Smith",
                "email": "alice@example.com",
                "department": "Sales",
            },
        ],
        "files": [
            {"id": "f1", "name": "report.pdf", "type": "application/pdf"},
        ],
    }


@pytest.fixture
def search_engine(index_data):
    """SearchEngine built from index_data."""
    from calchat.search import SearchEngine

    engine = SearchEngine()
    engine.build_index(**index_data)
    return engine


@pytest_asyncio.fixture
async def application():
    """Started Application."""
    from calchat.app import Application

    app = Application()
    await app.start()
    yield app
    await app.stop()


@pytest.fixture
def client(tmp_path):
    """TestClient over a fresh Application."""
    from fastapi.testclient import TestClient

    from calchat.api import create_fastapi_app
    from calchat.app import Application
    from calchat.config import Settings

    fastapi_app = create_fastapi_app(
        application=Application(),
        settings=Settings(env_file=tmp_path / "missing.env"),
    )
    with TestClient(fastapi_app) as test_client:
        yield test_client
