import logging
import uuid
from typing import List, Optional

import requests

from env import GROUPME_API_URL, GROUPME_TOKEN
from groupme import transport
from groupme.models import Bot, Envelope, Group, Message, MessageIndex, SentMessage, User

logger = logging.getLogger(__name__)

# The messages endpoint never returns more than this many messages per request
MAX_MESSAGES = 100


class GroupMeInterface:
    """
    Interface for the GroupMe API, authenticated with a user access token.
    Each method issues exactly one request and returns typed records.
    """

    def __init__(self, access_token: str = None, base_url: str = None, session: requests.Session = None):
        """
        Initialize the GroupMe interface.

        Args:
            access_token (str): GroupMe API access token. If None, will load from env.
            base_url (str): API root. If None, will load from env.
            session (requests.Session): HTTP session to send requests on. A new one is created if None.
        """
        self.access_token = access_token or GROUPME_TOKEN
        if not self.access_token:
            raise ValueError("GroupMe access token is required. Set GROUPME_TOKEN in .env file or pass as parameter.")

        self.base_url = (base_url or GROUPME_API_URL).rstrip('/')
        self.session = session or requests.Session()

    def _params(self, **extra) -> dict:
        params = {'token': self.access_token}
        params.update(extra)
        return params

    def get_groups(self) -> List[Group]:
        """
        Get the groups the current user is a member of.

        Returns:
            List[Group]: Groups in the order the server returns them

        Raises:
            RequestError: If the server answers with an error status
            TransportError: If the request or decoding fails
        """
        url = f"{self.base_url}/groups"
        envelope = transport.get(self.session, url, Envelope[List[Group]], params=self._params())
        return envelope.response or []

    def get_former_groups(self) -> List[Group]:
        """Get the groups the current user has left."""
        url = f"{self.base_url}/groups/former"
        envelope = transport.get(self.session, url, Envelope[List[Group]], params=self._params())
        return envelope.response or []

    def get_group(self, group_id: str) -> Optional[Group]:
        """
        Get a single group by id.

        Args:
            group_id (str): The GroupMe group ID

        Returns:
            Optional[Group]: The group, or None if the server returned an empty group
        """
        url = f"{self.base_url}/groups/{group_id}"
        envelope = transport.get(self.session, url, Envelope[Group], params=self._params())

        group = envelope.response
        if group is None or not group.id:
            logger.info("Group %s came back empty", group_id)
            return None
        return group

    def get_messages(self, group: Group, limit: int = 0) -> List[Message]:
        """
        Get the most recent messages of a group, newest first.

        Args:
            group (Group): The group to read
            limit (int): Number of messages to retrieve (max 100). 0 uses the server default.

        Returns:
            List[Message]: Messages as ordered by the server
        """
        if limit < 0:
            raise ValueError("Message limit cannot be negative")

        url = f"{self.base_url}/groups/{group.group_id}/messages"
        params = self._params()
        if limit:
            params['limit'] = min(limit, MAX_MESSAGES)

        envelope = transport.get(self.session, url, Envelope[MessageIndex], params=params)
        if envelope.response is None:
            return []
        return envelope.response.messages

    def send_message_text(self, group: Group, text: str) -> Message:
        """
        Send a text message to a group.

        Args:
            group (Group): The group to post in
            text (str): The message text to send

        Returns:
            Message: The message as stored by the server, with its id and timestamp

        Raises:
            ValueError: If the text is empty
        """
        if not text.strip():
            raise ValueError("Message text cannot be empty")

        url = f"{self.base_url}/groups/{group.group_id}/messages"
        message_data = {
            'message': {
                'source_guid': new_source_guid(),
                'text': text
            }
        }

        envelope = transport.post(self.session, url, Envelope[SentMessage], params=self._params(), payload=message_data)
        if envelope.response is None:
            return Message()
        return envelope.response.message

    def get_user_me(self) -> User:
        """Get the current authenticated user's profile."""
        url = f"{self.base_url}/users/me"
        envelope = transport.get(self.session, url, Envelope[User], params=self._params())
        return envelope.response or User()

    def get_bots(self) -> List[Bot]:
        """Get the bots created by the current user."""
        url = f"{self.base_url}/bots"
        envelope = transport.get(self.session, url, Envelope[List[Bot]], params=self._params())
        return envelope.response or []


def new_source_guid() -> str:
    """Unique identifier the server uses to deduplicate a sent message."""
    return str(uuid.uuid4())
