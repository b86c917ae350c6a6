#!/usr/bin/env python3
"""
Command-line tool for interacting with the GroupMe API.

Usage: groupme command [group-id]
"""

import logging
import sys
from typing import Callable, List, NamedTuple

from env import GROUPME_LOG_LEVEL, GROUPME_TOKEN
from groupme.formatting import format_group, format_group_line, format_message_line, format_sent, format_user_me
from groupme.groupme_interface import MAX_MESSAGES, GroupMeInterface
from groupme.models import Group

logger = logging.getLogger(__name__)


class Command(NamedTuple):
    name: str
    handler: Callable[[GroupMeInterface, List[str]], int]
    help: str


def cmd_group(interface: GroupMeInterface, args: List[str]) -> int:
    """Show a single group and its members."""
    group = get_group(interface, args)
    print(format_group(group))
    return 0


def cmd_groups(interface: GroupMeInterface, args: List[str]) -> int:
    """List the groups the user belongs to."""
    for group in interface.get_groups():
        print(format_group_line(group))
    return 0


def cmd_user_me(interface: GroupMeInterface, args: List[str]) -> int:
    """Show the current user's profile."""
    print(format_user_me(interface.get_user_me()))
    return 0


def cmd_message(interface: GroupMeInterface, args: List[str]) -> int:
    """Read one line from stdin and send it to a group."""
    group = get_group(interface, args)

    print("> ", end="", flush=True)
    line = sys.stdin.readline()
    if not line:
        # End of input, nothing to send
        return 0

    message = interface.send_message_text(group, line.rstrip("\r\n"))
    print(f"\n{format_sent(message, group)}")
    return 0


def cmd_messages(interface: GroupMeInterface, args: List[str]) -> int:
    """List the most recent messages of a group."""
    group = get_group(interface, args)
    for message in interface.get_messages(group, MAX_MESSAGES):
        print(format_message_line(message))
    return 0


COMMANDS = [
    Command("group", cmd_group, "get information about a specific group"),
    Command("groups", cmd_groups, "list groups for a given user"),
    Command("me", cmd_user_me, "get info about your user account"),
    Command("message", cmd_message, "send message to a group"),
    Command("messages", cmd_messages, "list messages for group given index"),
]


def get_group(interface: GroupMeInterface, args: List[str]) -> Group:
    """Fetch the group named by the first argument, failing if it is missing or empty."""
    if not args:
        raise ValueError("must provide group ID")

    group_id = args[0]
    group = interface.get_group(group_id)
    if group is None:
        raise ValueError(f"could not find group with ID {group_id}")
    return group


def usage() -> int:
    """Print the usage banner to stderr and return the failing exit code."""
    lines = [
        "GroupMe is a tool for interacting with the GroupMe API.",
        "",
        "Usage:",
        "",
        "    groupme command [arguments]",
        "",
        "Must set environment variable:",
        "",
        "    GROUPME_TOKEN=<your access token>",
        "",
        "The commands are:",
        "",
    ]
    lines.extend(f"    {command.name:<10}    {command.help}" for command in COMMANDS)
    print("\n".join(lines) + "\n", file=sys.stderr)
    return 1


def configure_logging(level_name: str) -> None:
    """
    Send log records to stderr at the given level.

    Raises:
        ValueError: If the level name is not a known logging level
    """
    level = logging.getLevelName(level_name.upper())
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level: {level_name}")

    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S',
        stream=sys.stderr
    )


def main(argv: List[str] = None, token: str = None, interface: GroupMeInterface = None) -> int:
    """Run one command and return the process exit code."""
    argv = sys.argv[1:] if argv is None else argv
    token = GROUPME_TOKEN if token is None else token

    try:
        configure_logging(GROUPME_LOG_LEVEL)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if not argv or argv[0] == "help" or not token:
        return usage()

    command = next((command for command in COMMANDS if command.name == argv[0]), None)
    if command is None:
        return usage()

    try:
        interface = interface or GroupMeInterface(token)
        logger.debug("Running command %s", command.name)
        return command.handler(interface, argv[1:])
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        print("\nOperation cancelled by user.", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
