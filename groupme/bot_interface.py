import logging
from typing import List, Union

import requests

from env import GROUPME_API_URL
from groupme import transport
from groupme.models import Attachment, Bot

logger = logging.getLogger(__name__)

# /bots/post answers 202 Accepted with an empty body
BOT_POST_STATUSES = (200, 201, 202)


class GroupMeBot:
    """Posts messages to a group as a bot, identified by its bot id rather than a user token."""

    def __init__(self, bot: Union[Bot, str], base_url: str = None, session: requests.Session = None):
        self.bot_id = bot.bot_id if isinstance(bot, Bot) else bot
        if not self.bot_id:
            raise ValueError("Bot id is required")

        self.base_url = (base_url or GROUPME_API_URL).rstrip('/')
        self.session = session or requests.Session()

    def send_message(self, text: str, attachments: List[Attachment] = None) -> requests.Response:
        """
        Send a message as the bot.

        Args:
            text (str): The message text to send
            attachments (List[Attachment]): Optional attachments to include

        Returns:
            requests.Response: The raw response; the endpoint returns no message body
        """
        if not text.strip() and not attachments:
            raise ValueError("Message text cannot be empty")

        url = f"{self.base_url}/bots/post"
        payload = {
            'bot_id': self.bot_id,
            'text': text,
            'attachments': [attachment.model_dump(mode='json') for attachment in attachments or []]
        }

        logger.debug("Posting as bot %s", self.bot_id)
        return transport.post(self.session, url, payload=payload, ok_statuses=BOT_POST_STATUSES)
