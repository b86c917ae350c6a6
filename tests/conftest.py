"""Pytest configuration and shared fixtures."""
import json

import pytest

from groupme.groupme_interface import GroupMeInterface


class FakeResponse:
    """Stands in for requests.Response."""

    def __init__(self, status_code=200, body=None):
        self.status_code = status_code
        if body is None:
            self.content = b""
        elif isinstance(body, bytes):
            self.content = body
        else:
            self.content = json.dumps(body).encode()

    def json(self):
        return json.loads(self.content)


class FakeSession:
    """Records every request and answers from a queue of canned responses."""

    def __init__(self):
        self.requests = []
        self.responses = []

    def queue(self, status_code=200, body=None):
        self.responses.append(FakeResponse(status_code, body))
        return self

    def fail(self, error):
        self.responses.append(error)
        return self

    def request(self, method, url, params=None, headers=None, json=None):
        self.requests.append({
            "method": method,
            "url": url,
            "params": params,
            "headers": headers,
            "json": json,
        })
        response = self.responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response

    @property
    def last(self):
        return self.requests[-1]


@pytest.fixture
def session():
    """Return a fake HTTP session."""
    return FakeSession()


@pytest.fixture
def interface(session):
    """Return a GroupMe interface wired to the fake session."""
    return GroupMeInterface("test-token", base_url="https://api.example.com/v3", session=session)


@pytest.fixture
def group_payload():
    """Return a group as the API sends it."""
    return {
        "id": "1234",
        "group_id": "1234",
        "name": "Family",
        "phone_number": None,
        "type": "private",
        "description": "Coolest Family Ever",
        "image_url": "https://i.groupme.com/123456789",
        "creator_user_id": "1234567890",
        "created_at": 1302623328,
        "updated_at": 1302623328,
        "office_mode": False,
        "share_url": "https://groupme.com/join_group/1234/SHARE_TOKEN",
        "max_members": 200,
        "members": [
            {
                "user_id": "1234567890",
                "nickname": "Jane",
                "muted": False,
                "image_url": "https://i.groupme.com/123456789",
                "autokicked": False,
            },
            {
                "user_id": "2345678901",
                "nickname": "John",
                "muted": True,
                "image_url": None,
                "autokicked": False,
            },
        ],
        "messages": {
            "count": 100,
            "last_message_id": "1234567890",
            "last_message_created_at": 1302623328,
            "preview": {
                "nickname": "Jane",
                "text": "Hello world",
                "image_url": "https://i.groupme.com/123456789",
                "attachments": [{"type": "image", "url": "https://i.groupme.com/123456789"}],
            },
        },
    }


@pytest.fixture
def message_payload():
    """Return a message as the API sends it."""
    return {
        "id": "1234567890",
        "source_guid": "GUID",
        "created_at": 1302623328,
        "user_id": "1234567890",
        "group_id": "1234567890",
        "name": "John",
        "avatar_url": "https://i.groupme.com/123456789",
        "text": "Hello world",
        "system": False,
        "favorited_by": ["101", "66"],
        "sender_type": "user",
        "sender_id": "1234567890",
        "attachments": [
            {"type": "image", "url": "https://i.groupme.com/123456789"},
            {"type": "location", "lat": "40.738206", "lng": "-73.993285", "name": "GroupMe HQ"},
            {"type": "split", "token": "SPLIT_TOKEN"},
            {"type": "emoji", "placeholder": "☃", "charmap": [[1, 42], [2, 34]]},
            {"type": "mentions", "user_ids": ["1234567890"], "loci": [[0, 5]]},
        ],
    }
