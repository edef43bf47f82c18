"""Telnet login probe."""

from __future__ import annotations

import re

from .base import LoginProbe
from .helpers import LineConnection, with_timeout
from .registry import register

IAC, DONT, DO, WONT, WILL, SB, SE = 255, 254, 253, 252, 251, 250, 240

LOGIN_PROMPT = re.compile(rb"[Ll]ogin[: ]*\Z")
PASSWORD_PROMPT = re.compile(rb"[Pp]ass(?:word|phrase)[: ]*\Z")
SHELL_PROMPT = re.compile(rb"[$%#>] \Z")


def split_negotiation(data: bytes) -> tuple[bytes, bytes]:
    """Separate telnet option negotiation from text.

    Returns the text and the replies refusing every option the server asked
    for (``DO`` gets ``WONT``, ``WILL`` gets ``DONT``). Subnegotiations are
    dropped and an escaped ``IAC IAC`` becomes one 0xFF byte.
    """
    text = bytearray()
    replies = bytearray()
    index = 0
    while index < len(data):
        byte = data[index]
        if byte != IAC:
            text.append(byte)
            index += 1
            continue

        command = data[index + 1] if index + 1 < len(data) else None
        if command in (DO, DONT, WILL, WONT) and index + 2 < len(data):
            option = data[index + 2]
            if command == DO:
                replies += bytes((IAC, WONT, option))
            elif command == WILL:
                replies += bytes((IAC, DONT, option))
            index += 3
        elif command == SB:
            end = data.find(bytes((IAC, SE)), index)
            index = len(data) if end < 0 else end + 2
        elif command == IAC:
            text.append(IAC)
            index += 2
        else:
            index += 2
    return bytes(text), bytes(replies)


async def read_until(
    connection: LineConnection, *prompts: re.Pattern[bytes]
) -> re.Pattern[bytes]:
    """Read until the text ends with one of ``prompts``; returns the one that matched."""
    buffer = b""
    while True:
        text, replies = split_negotiation(await connection.read())
        if replies:
            await connection.send(replies)
        buffer += text
        for prompt in prompts:
            if prompt.search(buffer):
                return prompt


@register
class TelnetProbe(LoginProbe):
    """Answers the login and password prompts; a shell prompt is a valid login.

    A server that prompts for a login again, or prints nothing that looks like
    a prompt within ``login_timeout``, rejected the credentials.
    """

    name = "telnet"
    summary = "Telnet login and password prompts"
    default_port = 23
    login_timeout = 2.0

    async def attempt(self, username: str, password: str) -> bool:
        async with self.connect() as connection:
            await read_until(connection, LOGIN_PROMPT)
            await connection.writeline(username)
            await read_until(connection, PASSWORD_PROMPT)
            await connection.writeline(password)

            prompt = await with_timeout(
                self.effective_login_timeout,
                read_until(connection, SHELL_PROMPT, LOGIN_PROMPT),
            )
            return prompt is SHELL_PROMPT
