"""Tests for the HTTP API."""


class TestChatRoutes:
    """Tests for /api/chats."""

    def test_chat_id(self, client):
        """Test deriving a chat id."""
        response = client.post(
            "/api/chats/id", json={"members": [{"id": "b"}, {"id": "a"}]}
        )
        assert response.status_code == 200
        assert response.json() == {"chat_id": "a-b"}

    def test_chat_id_no_members(self, client):
        """Test that no members give an empty id."""
        response = client.post("/api/chats/id", json={"members": []})
        assert response.json() == {"chat_id": ""}

    def test_chat_id_invalid_body(self, client):
        """Test that a member without id is rejected."""
        response = client.post("/api/chats/id", json={"members": [{"name": "x"}]})
        assert response.status_code == 422

    def test_grouped_passthrough(self, client):
        """Test that grouped messages come back unchanged."""
        body = {
            "a-b": [
                {
                    "id": "m1",
                    "sender": "a",
                    "content": "hi",
                    "time": "09:00",
                    "sender_name": None,
                    "attachments": [
                        {"name": "x.png", "type": "image/png", "size": 10, "url": None}
                    ],
                    "conversation_id": "a-b",
                },
                {
                    "id": "m2",
                    "sender": "b",
                    "content": "hey",
                    "time": "09:01",
                    "sender_name": "B",
                    "attachments": [],
                    "conversation_id": None,
                },
            ],
        }
        response = client.post("/api/chats/grouped", json=body)
        assert response.status_code == 200
        assert response.json() == body


class TestEventRoutes:
    """Tests for event categories and recurrence."""

    def test_list_categories(self, client):
        """Test listing categories in order."""
        response = client.get("/api/event-categories")
        assert response.status_code == 200
        assert [c["value"] for c in response.json()] == [
            "meeting",
            "birthday",
            "private",
            "holiday",
            "other",
        ]

    def test_get_category(self, client):
        """Test fetching one category."""
        response = client.get("/api/event-categories/private")
        assert response.json() == {"value": "private", "label": "Privat", "color": "#64748b"}

    def test_unknown_category(self, client):
        """Test 404 for unknown category."""
        assert client.get("/api/event-categories/gym").status_code == 404

    def test_recurrence(self, client):
        """Test expanding a weekly rule."""
        response = client.post(
            "/api/recurrence",
            json={"start_date": "2024-01-01", "frequency": "weekly", "count": 2},
        )
        assert response.status_code == 200
        assert response.json() == {"dates": ["2024-01-01", "2024-01-08"]}

    def test_recurrence_invalid_interval(self, client):
        """Test 400 for an invalid rule."""
        response = client.post(
            "/api/recurrence",
            json={"start_date": "2024-01-01", "frequency": "daily", "interval": 0, "count": 2},
        )
        assert response.status_code == 400

    def test_recurrence_beyond_year_9999(self, client):
        """Test that a series running off the calendar is cut short."""
        response = client.post(
            "/api/recurrence",
            json={"start_date": "2024-01-01", "frequency": "yearly", "interval": 10000, "count": 2},
        )
        assert response.status_code == 200
        assert response.json() == {"dates": ["2024-01-01"]}

    def test_recurrence_unknown_frequency(self, client):
        """Test 422 for a frequency outside the allowed set."""
        response = client.post(
            "/api/recurrence",
            json={"start_date": "2024-01-01", "frequency": "hourly", "count": 2},
        )
        assert response.status_code == 422


class TestSearchRoutes:
    """Tests for /api/search."""

    def test_field_search(self, client):
        """Test filtering items by field."""
        items = [{"content": "cat"}, {"content": "dog"}, {"content": "Cats"}]
        response = client.post(
            "/api/search", json={"items": items, "query": "CAT", "fields": ["content"]}
        )
        assert response.status_code == 200
        assert response.json() == {"items": [items[0], items[2]]}

    def test_field_search_no_fields(self, client):
        """Test that no fields match nothing."""
        response = client.post(
            "/api/search", json={"items": [{"a": "x"}], "query": "", "fields": []}
        )
        assert response.json() == {"items": []}

    def test_engine_search(self, client, index_data):
        """Test building the index from messages grouped by chat and searching it."""
        response = client.post("/api/search/index", json=index_data)
        assert response.status_code == 200
        assert response.json()["keys"] > 0

        response = client.get("/api/search/engine", params={"q": "meeting"})
        assert response.status_code == 200
        hits = response.json()
        assert [h["item"]["id"] for h in hits] == ["e1"]
        assert hits[0]["type"] == "events"

        response = client.get("/api/search/engine", params={"q": "lunch"})
        assert [(h["type"], h["item"]["id"]) for h in response.json()] == [("messages", "m1")]

    def test_engine_search_message_list(self, client):
        """Test that messages may also be posted as a flat list."""
        response = client.post(
            "/api/search/index", json={"messages": [{"id": "m9", "content": "dinner plans"}]}
        )
        assert response.status_code == 200

        response = client.get("/api/search/engine", params={"q": "dinner"})
        assert [h["item"]["id"] for h in response.json()] == ["m9"]

    def test_engine_search_filters(self, client, index_data):
        """Test type and date filters via query parameters."""
        client.post("/api/search/index", json=index_data)

        response = client.get(
            "/api/search/engine", params={"q": "alice", "types": ["contacts"]}
        )
        assert [h["item"]["id"] for h in response.json()] == ["c1"]

        response = client.get(
            "/api/search/engine",
            params={"q": "party meeting", "start": "2024-06-01", "end": "2024-06-30"},
        )
        assert [h["item"]["id"] for h in response.json()] == ["e2"]

    def test_engine_search_half_range(self, client):
        """Test that start without end is rejected."""
        response = client.get(
            "/api/search/engine", params={"q": "x", "start": "2024-06-01"}
        )
        assert response.status_code == 400

    def test_suggestions(self, client, index_data):
        """Test prefix suggestions."""
        client.post("/api/search/index", json={"events": index_data["events"]})
        response = client.get("/api/search/suggestions", params={"q": "birth"})
        assert response.json() == ["birthday"]


class TestPollRoutes:
    """Tests for /api/polls."""

    def _create(self, client, **overrides):
        body = {
            "question": "Pizza or sushi?",
            "options": ["Pizza", "Sushi"],
            "group_id": "g1",
            "user_id": "alice",
        }
        body.update(overrides)
        return client.post("/api/polls", json=body)

    def test_create_poll(self, client):
        """Test creating a poll."""
        response = self._create(client)
        assert response.status_code == 201
        data = response.json()
        assert [o["id"] for o in data["options"]] == ["opt0", "opt1"]
        assert data["results"] == {"opt0": 0, "opt1": 0}
        assert data["closed"] is False

    def test_create_poll_without_options(self, client):
        """Test 400 for a poll without options."""
        assert self._create(client, options=[]).status_code == 400

    def test_vote_and_get(self, client):
        """Test voting and reading the tally."""
        poll_id = self._create(client).json()["id"]

        response = client.post(
            f"/api/polls/{poll_id}/votes", json={"option_id": "opt1", "user_id": "bob"}
        )
        assert response.status_code == 200
        assert response.json()["results"] == {"opt0": 0, "opt1": 1}

        response = client.get(f"/api/polls/{poll_id}")
        assert response.json()["options"][1]["votes"] == ["bob"]

    def test_vote_unknown_option(self, client):
        """Test 400 for an unknown option."""
        poll_id = self._create(client).json()["id"]
        response = client.post(
            f"/api/polls/{poll_id}/votes", json={"option_id": "opt7", "user_id": "bob"}
        )
        assert response.status_code == 400

    def test_vote_closed_poll(self, client):
        """Test 409 after closing."""
        poll_id = self._create(client).json()["id"]
        assert client.post(f"/api/polls/{poll_id}/close").json()["closed"] is True

        response = client.post(
            f"/api/polls/{poll_id}/votes", json={"option_id": "opt0", "user_id": "bob"}
        )
        assert response.status_code == 409

    def test_missing_poll(self, client):
        """Test 404 for unknown polls."""
        assert client.get("/api/polls/nope").status_code == 404
        assert client.post("/api/polls/nope/close").status_code == 404
        response = client.post(
            "/api/polls/nope/votes", json={"option_id": "opt0", "user_id": "bob"}
        )
        assert response.status_code == 404

    def test_list_by_group(self, client):
        """Test listing polls of a group."""
        self._create(client)
        self._create(client, group_id="g2")
        assert len(client.get("/api/polls").json()) == 2
        groups = [p["group_id"] for p in client.get("/api/polls", params={"group_id": "g2"}).json()]
        assert groups == ["g2"]


class TestControlRoutes:
    """Tests for /api/control."""

    def test_health(self, client):
        """Test liveness."""
        assert client.get("/api/control/health").json() == {"status": "ok"}

    def test_reset(self, client):
        """Test that reset drops polls."""
        client.post(
            "/api/polls",
            json={"question": "q", "options": ["a"], "group_id": "g", "user_id": "u"},
        )
        response = client.post("/api/control/reset")
        assert response.json() == {"status": "ok"}
        assert client.get("/api/polls").json() == []
