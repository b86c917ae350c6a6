"""
Typed records for the GroupMe v3 API.

Every record mirrors the JSON the API returns. Unknown keys are ignored and
``null`` values fall back to the field default, so a partial payload still
validates into a record with empty fields.
"""

import json
import logging
from typing import Annotated, Generic, List, Literal, Optional, Tuple, TypeVar, Union

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, model_validator

logger = logging.getLogger(__name__)

T = TypeVar('T')


class Record(BaseModel):
    """Base for all API records: frozen once validated."""

    model_config = ConfigDict(frozen=True, extra='ignore', coerce_numbers_to_str=True)

    @model_validator(mode='before')
    @classmethod
    def drop_nulls(cls, data):
        if isinstance(data, dict):
            return {key: value for key, value in data.items() if value is not None}
        return data


class User(Record):
    id: str = ''
    user_id: str = ''
    name: str = ''
    nickname: str = ''
    phone_number: str = ''
    email: str = ''
    sms: bool = False
    image_url: str = ''
    muted: bool = False
    autokicked: bool = False
    created_at: int = 0
    updated_at: int = 0


# Attachments

class ImageAttachment(Record):
    type: Literal['image'] = 'image'
    url: str = ''


class LocationAttachment(Record):
    type: Literal['location'] = 'location'
    name: str = ''
    lat: str = ''
    lng: str = ''


class SplitAttachment(Record):
    type: Literal['split'] = 'split'
    token: str = ''


class EmojiAttachment(Record):
    type: Literal['emoji'] = 'emoji'
    placeholder: str = ''
    charmap: List[Tuple[int, int]] = Field(default_factory=list)


class MentionsAttachment(Record):
    type: Literal['mentions'] = 'mentions'
    user_ids: List[str] = Field(default_factory=list)
    loci: List[Tuple[int, int]] = Field(default_factory=list)


Attachment = Annotated[
    Union[ImageAttachment, LocationAttachment, SplitAttachment, EmojiAttachment, MentionsAttachment],
    Field(discriminator='type'),
]

ATTACHMENT_TYPES = ('image', 'location', 'split', 'emoji', 'mentions')


def _known_attachments(value):
    """Keep only attachments whose type tag is one we model."""
    if value is None:
        return []
    if not isinstance(value, list):
        return value
    kept = []
    for item in value:
        kind = item.get('type') if isinstance(item, dict) else getattr(item, 'type', None)
        if kind in ATTACHMENT_TYPES:
            kept.append(item)
        else:
            logger.debug("Skipping unsupported attachment type %r", kind)
    return kept


AttachmentList = Annotated[List[Attachment], BeforeValidator(_known_attachments)]


class MessagePreview(Record):
    nickname: str = ''
    text: str = ''
    image_url: str = ''
    attachments: AttachmentList = Field(default_factory=list)


class GroupMessages(Record):
    """Message summary embedded in a group."""

    count: int = 0
    last_message_id: str = ''
    last_message_created_at: int = 0
    preview: MessagePreview = Field(default_factory=MessagePreview)


class Message(Record):
    id: str = ''
    source_guid: str = ''
    created_at: int = 0
    user_id: str = ''
    group_id: str = ''
    name: str = ''
    avatar_url: str = ''
    text: str = ''
    system: bool = False
    favorited_by: List[str] = Field(default_factory=list)
    attachments: AttachmentList = Field(default_factory=list)
    sender_type: str = ''
    sender_id: str = ''


class Group(Record):
    id: str = ''
    group_id: str = ''
    name: str = ''
    phone_number: str = ''
    type: str = ''
    description: str = ''
    image_url: str = ''
    creator_user_id: str = ''
    created_at: int = 0
    updated_at: int = 0
    office_mode: bool = False
    share_url: str = ''
    members: List[User] = Field(default_factory=list)
    messages: GroupMessages = Field(default_factory=GroupMessages)
    max_members: int = 0

    def get_user(self, user_id: str) -> Optional[User]:
        """Return the member with the given user id, if any."""
        for member in self.members:
            if member.user_id == user_id:
                return member
        return None

    def __str__(self) -> str:
        return json.dumps({'group_id': self.group_id, 'name': self.name}, separators=(',', ':'))


class Bot(Record):
    bot_id: str = ''
    group_id: str = ''
    name: str = ''
    avatar_url: str = ''
    callback_url: str = ''


# Response envelopes

class Envelope(BaseModel, Generic[T]):
    """The ``{"response": ...}`` wrapper around every payload."""

    model_config = ConfigDict(frozen=True, extra='ignore')

    response: Optional[T] = None


class MessageIndex(Record):
    count: int = 0
    messages: List[Message] = Field(default_factory=list)


class SentMessage(Record):
    message: Message = Field(default_factory=Message)


def find_message(messages: List[Message], message_id: str) -> Optional[Message]:
    """Return the first message with the given id, if any."""
    for message in messages:
        if message.id == message_id:
            return message
    return None
