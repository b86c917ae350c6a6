"""Unit tests for GroupMeBot."""
import pytest

from groupme.bot_interface import GroupMeBot
from groupme.errors import RequestError
from groupme.models import Bot, ImageAttachment, MentionsAttachment

BASE_URL = "https://api.example.com/v3"


@pytest.fixture
def bot(session):
    """Return a bot wired to the fake session."""
    return GroupMeBot(Bot(bot_id="b1", group_id="g1"), base_url=BASE_URL, session=session)


class TestGroupMeBot:
    """Tests for posting as a bot."""

    def test_accepts_bot_id(self, session):
        """Test building a bot from a plain id."""
        assert GroupMeBot("b2", session=session).bot_id == "b2"

    def test_requires_bot_id(self, session):
        """Test that an empty bot id is rejected."""
        with pytest.raises(ValueError):
            GroupMeBot(Bot(), session=session)

    def test_send_message(self, bot, session):
        """Test posting text and returning the raw response."""
        session.queue(202, None)

        response = bot.send_message("hello")

        assert response.status_code == 202
        assert session.last["url"] == f"{BASE_URL}/bots/post"
        assert session.last["json"] == {"bot_id": "b1", "text": "hello", "attachments": []}
        assert session.last["params"] is None

    def test_send_message_with_attachments(self, bot, session):
        """Test that attachments are serialized with their type tags."""
        session.queue(202, None)

        bot.send_message("hi @Jane", [
            ImageAttachment(url="https://i.groupme.com/1"),
            MentionsAttachment(user_ids=["u1"], loci=[(3, 5)]),
        ])

        assert session.last["json"]["attachments"] == [
            {"type": "image", "url": "https://i.groupme.com/1"},
            {"type": "mentions", "user_ids": ["u1"], "loci": [[3, 5]]},
        ]

    def test_send_message_rejected(self, bot, session):
        """Test that an unknown bot surfaces as a RequestError."""
        session.queue(404, None)

        with pytest.raises(RequestError) as exc_info:
            bot.send_message("hello")

        assert exc_info.value.status_code == 404

    def test_send_empty_message(self, bot, session):
        """Test that a bot post needs text or attachments."""
        with pytest.raises(ValueError):
            bot.send_message("")

        assert session.requests == []
