"""PostgreSQL login probe."""

from __future__ import annotations

import asyncio
import logging
import math

import psycopg2

from clawbrute.engine.probe import AttemptProbe

from .base import LoginProbe
from .config import PostgresProbeConfig
from .registry import register

logger = logging.getLogger(__name__)


@register
class PostgresProbe(LoginProbe):
    """Logs in and runs ``SELECT 1``; any operational error is a miss."""

    name = "postgres"
    summary = "PostgreSQL login and SELECT 1"
    default_port = 5432
    login_timeout = 4.0
    config_class = PostgresProbeConfig
    config: PostgresProbeConfig
    attempt_errors = AttemptProbe.attempt_errors + (psycopg2.Error,)

    async def attempt(self, username: str, password: str) -> bool:
        return await asyncio.to_thread(self._login, username, password)

    def connect_kwargs(self, username: str, password: str) -> dict[str, object]:
        # libpq takes whole seconds and treats 0 as "wait forever".
        timeout = self.effective_login_timeout or self.config.timeout
        kwargs: dict[str, object] = {
            "host": self.host,
            "port": self.port,
            "user": username,
            "password": password,
            "connect_timeout": max(1, math.ceil(timeout)),
            "sslmode": "require" if self.config.ssl else "prefer",
        }
        if self.config.database:
            kwargs["dbname"] = self.config.database
        return kwargs

    def _login(self, username: str, password: str) -> bool:
        try:
            connection = psycopg2.connect(**self.connect_kwargs(username, password))
        except psycopg2.OperationalError as exc:
            logger.debug("Postgres login failed for %s on %s: %s", username, self.target, exc)
            return False
        try:
            with connection.cursor() as cursor:
                cursor.execute("SELECT 1")
                return cursor.fetchone() == (1,)
        finally:
            connection.close()
