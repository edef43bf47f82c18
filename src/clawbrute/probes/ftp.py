"""FTP login probe."""

from __future__ import annotations

from clawbrute.errors import ProbeAttemptFailure

from .base import NetworkProbe
from .helpers import LineConnection
from .registry import register


async def read_reply(connection: LineConnection) -> str:
    """Read a full FTP reply and return its final line.

    Multi-line replies start with ``NNN-`` and end with a line ``NNN <text>``.
    """
    line = await connection.readline()
    if len(line) >= 4 and line[3] == "-":
        code = line[:3]
        while not (line.startswith(code) and line[3:4] == " "):
            line = await connection.readline()
    return line


@register
class FTPProbe(NetworkProbe):
    """Logs in with USER/PASS; a 230 reply is a valid login."""

    name = "ftp"
    summary = "FTP USER/PASS login"
    default_port = 21
    ssl_port = 990

    async def attempt(self, username: str, password: str) -> bool:
        async with self.connect() as connection:
            greeting = await read_reply(connection)
            if not greeting.startswith("220"):
                raise ProbeAttemptFailure(f"unexpected FTP greeting from {self.target}: {greeting}")

            await connection.writeline(f"USER {username}")
            reply = await read_reply(connection)
            if reply.startswith("230"):
                return True
            if not reply.startswith("331"):
                return False

            await connection.writeline(f"PASS {password}")
            reply = await read_reply(connection)
            return reply.startswith("230")
