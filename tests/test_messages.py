"""Tests for message endpoints: sending, viewing, and read acknowledgment."""

from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from app.models.message import Message


def _send(client: TestClient, sender: dict, to_username: str, body: str = "hi") -> dict:
    """Send a message via the API and return the response JSON."""
    resp = client.post(
        "/api/v1/messages/",
        json={"to_username": to_username, "body": body},
        headers={"Authorization": f"Bearer {sender['token']}"},
    )
    assert resp.status_code == 200, resp.text
    return resp.json()["message"]


class TestSendMessage:
    """Tests for sending messages."""

    def test_send_message(self, client: TestClient, alice: dict, bob: dict):
        """Sender comes from the token, not the request body."""
        message = _send(client, alice, "bob", "hello bob")
        assert message["from_username"] == "alice"
        assert message["to_username"] == "bob"
        assert message["body"] == "hello bob"
        assert message["sent_at"]
        assert "read_at" not in message

    def test_send_starts_unread(self, client: TestClient, alice: dict, bob: dict, db_session: Session):
        message = _send(client, alice, "bob")
        assert db_session.get(Message, message["id"]).read_at is None

    def test_send_to_unknown_user(self, client: TestClient, alice: dict, db_session: Session):
        """Unknown recipients are rejected and nothing is stored."""
        resp = client.post(
            "/api/v1/messages/",
            json={"to_username": "ghost", "body": "anyone?"},
            headers={"Authorization": f"Bearer {alice['token']}"},
        )
        assert resp.status_code == 404
        assert db_session.query(Message).count() == 0

    def test_send_to_self(self, client: TestClient, alice: dict):
        resp = client.post(
            "/api/v1/messages/",
            json={"to_username": "alice", "body": "note to self"},
            headers={"Authorization": f"Bearer {alice['token']}"},
        )
        assert resp.status_code == 400

    def test_send_empty_body(self, client: TestClient, alice: dict, bob: dict):
        resp = client.post(
            "/api/v1/messages/",
            json={"to_username": "bob", "body": ""},
            headers={"Authorization": f"Bearer {alice['token']}"},
        )
        assert resp.status_code == 422

    def test_send_requires_auth(self, client: TestClient, bob: dict):
        resp = client.post("/api/v1/messages/", json={"to_username": "bob", "body": "hi"})
        assert resp.status_code == 401


class TestGetMessage:
    """Tests for viewing a single message."""

    def test_sender_can_view(self, client: TestClient, alice: dict, bob: dict):
        message = _send(client, alice, "bob", "hello")
        resp = client.get(
            f"/api/v1/messages/{message['id']}",
            headers={"Authorization": f"Bearer {alice['token']}"},
        )
        assert resp.status_code == 200
        data = resp.json()["message"]
        assert data["body"] == "hello"
        assert data["read_at"] is None
        assert data["from_user"] == {
            "username": "alice",
            "first_name": "Alice",
            "last_name": "Tester",
            "phone": "555-0100",
        }
        assert data["to_user"]["username"] == "bob"

    def test_recipient_can_view(self, client: TestClient, alice: dict, bob: dict):
        message = _send(client, alice, "bob")
        resp = client.get(
            f"/api/v1/messages/{message['id']}",
            headers={"Authorization": f"Bearer {bob['token']}"},
        )
        assert resp.status_code == 200

    def test_third_party_forbidden(self, client: TestClient, alice: dict, bob: dict, carol: dict):
        message = _send(client, alice, "bob")
        resp = client.get(
            f"/api/v1/messages/{message['id']}",
            headers={"Authorization": f"Bearer {carol['token']}"},
        )
        assert resp.status_code == 403

    def test_missing_message(self, client: TestClient, alice: dict):
        """Missing messages are 404, distinct from 403."""
        resp = client.get("/api/v1/messages/999", headers={"Authorization": f"Bearer {alice['token']}"})
        assert resp.status_code == 404

    def test_out_of_range_ids(self, client: TestClient, alice: dict):
        """Ids no row can have are 404 rather than a database error."""
        for message_id in ("99999999999999999999999", "0", "-1"):
            resp = client.get(f"/api/v1/messages/{message_id}", headers={"Authorization": f"Bearer {alice['token']}"})
            assert resp.status_code == 404

    def test_profile_never_includes_password_hash(self, client: TestClient, alice: dict, bob: dict):
        message = _send(client, alice, "bob")
        resp = client.get(
            f"/api/v1/messages/{message['id']}",
            headers={"Authorization": f"Bearer {bob['token']}"},
        )
        assert "password" not in resp.text


class TestMarkRead:
    """Tests for marking messages read."""

    def test_recipient_marks_read(self, client: TestClient, alice: dict, bob: dict):
        message = _send(client, alice, "bob")
        resp = client.post(
            f"/api/v1/messages/{message['id']}/read",
            headers={"Authorization": f"Bearer {bob['token']}"},
        )
        assert resp.status_code == 200
        data = resp.json()["message"]
        assert set(data) == {"id", "read_at"}
        assert data["id"] == message["id"]
        assert data["read_at"] is not None

    def test_sender_cannot_mark_read(self, client: TestClient, alice: dict, bob: dict, db_session: Session):
        """The sender is a participant but still may not acknowledge the message."""
        message = _send(client, alice, "bob")
        resp = client.post(
            f"/api/v1/messages/{message['id']}/read",
            headers={"Authorization": f"Bearer {alice['token']}"},
        )
        assert resp.status_code == 403
        db_session.expire_all()
        assert db_session.get(Message, message["id"]).read_at is None

    def test_third_party_cannot_mark_read(self, client: TestClient, alice: dict, bob: dict, carol: dict):
        message = _send(client, alice, "bob")
        resp = client.post(
            f"/api/v1/messages/{message['id']}/read",
            headers={"Authorization": f"Bearer {carol['token']}"},
        )
        assert resp.status_code == 403

    def test_mark_read_twice_keeps_first_timestamp(self, client: TestClient, alice: dict, bob: dict):
        message = _send(client, alice, "bob")
        url = f"/api/v1/messages/{message['id']}/read"
        headers = {"Authorization": f"Bearer {bob['token']}"}
        first = client.post(url, headers=headers).json()["message"]["read_at"]
        second = client.post(url, headers=headers).json()["message"]["read_at"]
        assert first == second

    def test_mark_missing_message(self, client: TestClient, bob: dict):
        resp = client.post("/api/v1/messages/999/read", headers={"Authorization": f"Bearer {bob['token']}"})
        assert resp.status_code == 404

    def test_mark_out_of_range_id(self, client: TestClient, bob: dict):
        """Ids beyond a 64-bit integer are simply not found."""
        resp = client.post(
            "/api/v1/messages/99999999999999999999999/read",
            headers={"Authorization": f"Bearer {bob['token']}"},
        )
        assert resp.status_code == 404


class TestEndToEnd:
    """Register, log in, send, acknowledge."""

    def test_alice_and_bob(self, client: TestClient):
        for name in ("alice", "bob"):
            resp = client.post(
                "/api/v1/auth/register",
                json={
                    "username": name,
                    "password": f"{name}-pw",
                    "first_name": name.title(),
                    "last_name": "Example",
                    "phone": "555-0000",
                },
            )
            assert resp.status_code == 200

        t1 = client.post("/api/v1/auth/login", json={"username": "alice", "password": "alice-pw"}).json()["token"]

        resp = client.post(
            "/api/v1/messages/",
            json={"to_username": "bob", "body": "hi"},
            headers={"Authorization": f"Bearer {t1}"},
        )
        assert resp.status_code == 200
        message_id = resp.json()["message"]["id"]

        detail = client.get(f"/api/v1/messages/{message_id}", headers={"Authorization": f"Bearer {t1}"})
        assert detail.json()["message"]["read_at"] is None

        t2 = client.post("/api/v1/auth/login", json={"username": "bob", "password": "bob-pw"}).json()["token"]

        resp = client.post(f"/api/v1/messages/{message_id}/read", headers={"Authorization": f"Bearer {t2}"})
        assert resp.status_code == 200
        assert resp.json()["message"]["id"] == message_id
        assert resp.json()["message"]["read_at"] is not None

        resp = client.post(f"/api/v1/messages/{message_id}/read", headers={"Authorization": f"Bearer {t1}"})
        assert resp.status_code == 403
