"""POP3 and IMAP login probes."""

from __future__ import annotations

from .base import LoginProbe
from .config import MailProbeConfig
from .helpers import with_timeout
from .registry import register


def imap_quote(value: str) -> str:
    """Quote ``value`` as an IMAP quoted string."""
    escaped = value.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


class MailProbe(LoginProbe):
    """Mail server probe; bare usernames get ``@domain`` appended."""

    config_class = MailProbeConfig
    config: MailProbeConfig

    @property
    def domain(self) -> str:
        return self.config.domain or self.config.host

    def mailbox(self, username: str) -> str:
        return username if "@" in username else f"{username}@{self.domain}"


@register
class POP3Probe(MailProbe):
    name = "pop3"
    summary = "POP3 USER/PASS login"
    default_port = 110
    ssl_port = 995
    login_timeout = 5.0

    async def attempt(self, username: str, password: str) -> bool:
        async with self.connect() as connection:
            await connection.readline()
            await connection.writeline(f"USER {self.mailbox(username)}")
            reply = await connection.readline()
            if not reply.startswith("+OK"):
                return False

            await connection.writeline(f"PASS {password}")
            # Servers delay the reply to a bad password.
            reply = await with_timeout(self.effective_login_timeout, connection.readline())
            return reply is not None and reply.startswith("+OK")


@register
class IMAPProbe(MailProbe):
    name = "imap"
    summary = "IMAP LOGIN command"
    default_port = 143
    ssl_port = 993

    async def attempt(self, username: str, password: str) -> bool:
        async with self.connect() as connection:
            await connection.readline()
            await connection.writeline(
                f"A1 LOGIN {imap_quote(self.mailbox(username))} {imap_quote(password)}"
            )
            while True:
                reply = await connection.readline()
                if reply.startswith("A1 "):
                    return reply[3:].upper().startswith("OK")
