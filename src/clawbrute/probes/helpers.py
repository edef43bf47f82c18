"""Connection and timeout helpers that probes call explicitly."""

from __future__ import annotations

import asyncio
import ssl
from collections.abc import AsyncIterator, Awaitable
from contextlib import asynccontextmanager
from typing import TypeVar

T = TypeVar("T")
D = TypeVar("D")


async def with_timeout(seconds: float | None, awaitable: Awaitable[T], default: D = None) -> T | D:
    """Await ``awaitable``, returning ``default`` instead of raising on timeout.

    Servers that stall on a failed login are then read as "not a match".
    """
    if seconds is None:
        return await awaitable
    try:
        return await asyncio.wait_for(awaitable, timeout=seconds)
    except TimeoutError:
        return default


def insecure_ssl_context() -> ssl.SSLContext:
    """TLS context that accepts any certificate."""
    ctx = ssl.create_default_context()
    ctx.check_hostname = False
    ctx.verify_mode = ssl.CERT_NONE
    return ctx


async def open_connection(
    host: str,
    port: int,
    *,
    use_ssl: bool = False,
    timeout: float | None = None,
) -> tuple[asyncio.StreamReader, asyncio.StreamWriter]:
    """Open a TCP connection, wrapped in TLS when ``use_ssl`` is set."""
    connecting = asyncio.open_connection(
        host,
        port,
        ssl=insecure_ssl_context() if use_ssl else None,
        server_hostname=host if use_ssl else None,
    )
    if timeout is None:
        return await connecting
    return await asyncio.wait_for(connecting, timeout=timeout)


class LineConnection:
    """CRLF line-oriented text connection used by the TCP probes."""

    def __init__(
        self,
        reader: asyncio.StreamReader,
        writer: asyncio.StreamWriter,
        timeout: float | None = None,
        encoding: str = "utf-8",
    ):
        self.reader = reader
        self.writer = writer
        self.timeout = timeout
        self.encoding = encoding

    async def readline(self) -> str:
        """Read one line without its line ending; EOFError when the peer hung up."""
        reading = self.reader.readline()
        if self.timeout is None:
            data = await reading
        else:
            data = await asyncio.wait_for(reading, timeout=self.timeout)
        if not data:
            raise EOFError("connection closed by peer")
        return data.decode(self.encoding, errors="replace").rstrip("\r\n")

    async def read(self, size: int = 4096) -> bytes:
        """Read whatever bytes are available, up to ``size``; EOFError on hang-up."""
        reading = self.reader.read(size)
        if self.timeout is None:
            data = await reading
        else:
            data = await asyncio.wait_for(reading, timeout=self.timeout)
        if not data:
            raise EOFError("connection closed by peer")
        return data

    async def send(self, data: bytes) -> None:
        self.writer.write(data)
        await self.writer.drain()

    async def writeline(self, line: str) -> None:
        await self.send(f"{line}\r\n".encode(self.encoding))

    async def close(self) -> None:
        self.writer.close()
        try:
            await self.writer.wait_closed()
        except OSError:
            pass


@asynccontextmanager
async def connect_lines(
    host: str,
    port: int,
    *,
    use_ssl: bool = False,
    timeout: float | None = None,
) -> AsyncIterator[LineConnection]:
    """Open a :class:`LineConnection` and close it when the block exits."""
    reader, writer = await open_connection(host, port, use_ssl=use_ssl, timeout=timeout)
    connection = LineConnection(reader, writer, timeout=timeout)
    try:
        yield connection
    finally:
        await connection.close()
