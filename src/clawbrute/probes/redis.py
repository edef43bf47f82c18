"""Redis AUTH probe."""

from __future__ import annotations

from .base import NetworkProbe
from .registry import register


def encode_command(*args: str) -> bytes:
    """Encode a command as a RESP array of bulk strings."""
    parts = [f"*{len(args)}\r\n".encode()]
    for arg in args:
        data = arg.encode("utf-8")
        parts.append(f"${len(data)}\r\n".encode() + data + b"\r\n")
    return b"".join(parts)


@register
class RedisProbe(NetworkProbe):
    """Sends ``AUTH``; an empty username uses the password-only form."""

    name = "redis"
    summary = "Redis AUTH (ACL users or requirepass)"
    default_port = 6379

    async def attempt(self, username: str, password: str) -> bool:
        async with self.connect() as connection:
            if username:
                await connection.send(encode_command("AUTH", username, password))
            else:
                await connection.send(encode_command("AUTH", password))
            return await connection.readline() == "+OK"
