"""
Text rendering for the command-line tool.

Each function takes a record and returns the text to print, without a
trailing newline.
"""

from datetime import datetime, timezone

from groupme.models import (
    EmojiAttachment,
    Group,
    ImageAttachment,
    LocationAttachment,
    MentionsAttachment,
    Message,
    SplitAttachment,
    User,
)


def format_timestamp(timestamp: int) -> str:
    """Render a Unix timestamp in UTC, or the raw number when it is out of range."""
    if not timestamp:
        return '-'
    try:
        return datetime.fromtimestamp(timestamp, tz=timezone.utc).strftime('%Y-%m-%d %H:%M:%S UTC')
    except (OverflowError, OSError, ValueError):
        return str(timestamp)


def format_group_line(group: Group) -> str:
    """One line of the groups listing: id right-aligned in 8 columns, then the name."""
    return f" {group.id:>8} - {group.name}"


def format_group(group: Group) -> str:
    """Multi-line dump of a group, headed by its group id and name."""
    lines = [
        f"group {group.group_id}: {group.name}",
        f"  description:  {group.description}",
        f"  creator:      {group.creator_user_id}",
        f"  created:      {format_timestamp(group.created_at)}",
        f"  updated:      {format_timestamp(group.updated_at)}",
        f"  office mode:  {'yes' if group.office_mode else 'no'}",
        f"  share url:    {group.share_url}",
        f"  members:      {len(group.members)}/{group.max_members}",
    ]
    for member in group.members:
        lines.append(f"    {member.user_id:>10}  {member.nickname or member.name}")
    return "\n".join(lines)


def format_user_me(user: User) -> str:
    """Profile of the current user as a JSON-looking literal."""
    return (
        "{\n"
        f'  "id": "{user.id}",\n'
        f'  "phone_number": "{user.phone_number}",\n'
        f'  "image_url": "{user.image_url}",\n'
        f'  "name": "{user.name}",\n'
        f'  "created_at": {user.created_at},\n'
        f'  "updated_at": {user.updated_at},\n'
        f'  "email": "{user.email}",\n'
        f'  "sms": {"true" if user.sms else "false"}\n'
        "}"
    )


def format_attachment(attachment) -> str:
    """Short description of a single attachment."""
    if isinstance(attachment, ImageAttachment):
        return f"image {attachment.url}"
    if isinstance(attachment, LocationAttachment):
        return f"location {attachment.name} ({attachment.lat}, {attachment.lng})"
    if isinstance(attachment, SplitAttachment):
        return f"split {attachment.token}"
    if isinstance(attachment, EmojiAttachment):
        return f"emoji {attachment.placeholder}"
    if isinstance(attachment, MentionsAttachment):
        return f"mentions {','.join(attachment.user_ids)}"
    raise TypeError(f"Unsupported attachment: {attachment!r}")


def format_message_line(message: Message) -> str:
    """One line of the messages listing."""
    attachments = ", ".join(format_attachment(attachment) for attachment in message.attachments)
    return f"{message.id}  {message.name:<16}  '{message.text}'  [{attachments}]"


def format_sent(message: Message, group: Group) -> str:
    """Confirmation printed after a message is sent."""
    return f"Sent message '{message.text}' to group '{group.name}'"
