"""Tests for the Session record model."""

from datetime import UTC, datetime, timedelta

from gatekeeper.core.modules.session.models import Session, generate_token


class TestSessionModel:
    def test_tokens_are_unique_and_long(self):
        tokens = {generate_token() for _ in range(100)}
        assert len(tokens) == 100
        assert all(len(token) >= 40 for token in tokens)

    def test_to_mongo_uses_token_as_id(self):
        """Test that the token is stored as the document primary key."""
        created_at = datetime(2026, 1, 1, tzinfo=UTC)
        session = Session(user_id="1", role="admin", created_at=created_at, expires_at=created_at + timedelta(minutes=5))
        doc = session.to_mongo()
        assert doc["_id"] == session.token
        assert "token" not in doc
        assert doc["user_id"] == "1"
        assert doc["expires_at"] == created_at + timedelta(minutes=5)

    def test_model_validate_from_mongo_document(self):
        doc = {
            "_id": "abc",
            "user_id": "1",
            "role": "admin",
            "created_at": datetime(2026, 1, 1, tzinfo=UTC),
            "expires_at": datetime(2026, 1, 1, 0, 5, tzinfo=UTC),
        }
        session = Session.model_validate(doc)
        assert session.token == "abc"

    def test_naive_datetimes_are_treated_as_utc(self):
        """Test documents read without tz_aware still compare correctly."""
        session = Session.model_validate(
            {
                "_id": "abc",
                "user_id": "1",
                "role": "admin",
                "created_at": datetime(2026, 1, 1),
                "expires_at": datetime(2026, 1, 1, 0, 5),
            }
        )
        assert session.expires_at.tzinfo is UTC
        assert session.is_expired(datetime(2026, 1, 1, 0, 4, tzinfo=UTC)) is False

    def test_is_expired_boundary(self):
        """Test that a session is invalid from the expiry instant on."""
        expires_at = datetime(2026, 1, 1, 0, 5, tzinfo=UTC)
        session = Session(user_id="1", role="admin", expires_at=expires_at)
        assert session.is_expired(expires_at - timedelta(seconds=1)) is False
        assert session.is_expired(expires_at) is True
        assert session.is_expired(expires_at + timedelta(seconds=1)) is True
