"""HTTP basic auth and login form probes."""

from __future__ import annotations

import httpx

from clawbrute.engine.probe import AttemptProbe

from .base import NetworkProbe
from .config import HTTPLoginConfig, HTTPProbeConfig
from .http_helpers import looks_like_login_success
from .registry import register


class HTTPProbe(NetworkProbe):
    """Shared httpx client handling; one client per worker."""

    default_port = 80
    ssl_port = 443
    config_class = HTTPProbeConfig
    config: HTTPProbeConfig
    attempt_errors = (*AttemptProbe.attempt_errors, httpx.TransportError)

    def __init__(self, config: HTTPProbeConfig):
        super().__init__(config)
        self._client: httpx.AsyncClient | None = None

    @property
    def base_url(self) -> str:
        scheme = "https" if self.config.ssl else "http"
        standard_port = 443 if self.config.ssl else 80
        netloc = self.host if self.port == standard_port else f"{self.host}:{self.port}"
        return f"{scheme}://{netloc}"

    def url_for(self, path: str) -> str:
        return f"{self.base_url}{path}"

    @property
    def client(self) -> httpx.AsyncClient:
        if self._client is None:
            raise RuntimeError(f"{type(self).__name__} used before setup()")
        return self._client

    async def setup(self) -> None:
        headers = {"User-Agent": self.config.user_agent} if self.config.user_agent else None
        self._client = httpx.AsyncClient(
            base_url=self.base_url,
            headers=headers,
            timeout=self.config.timeout,
            follow_redirects=False,
            verify=False,
            proxy=self.config.proxy,
        )

    async def teardown(self) -> None:
        if self._client is not None:
            await self._client.aclose()
            self._client = None


@register
class HTTPBasicAuthProbe(HTTPProbe):
    """Any status other than 401 means the credentials were accepted."""

    name = "http/basic_auth"
    summary = "HTTP basic authentication"

    async def attempt(self, username: str, password: str) -> bool:
        response = await self.client.request(
            self.config.method,
            self.config.path,
            auth=(username, password),
        )
        return response.status_code != 401


@register
class HTTPLoginProbe(HTTPProbe):
    """Submits a login form and compares the response with the failure markers."""

    name = "http/login"
    summary = "HTTP login form submission"
    config_class = HTTPLoginConfig
    config: HTTPLoginConfig

    async def setup(self) -> None:
        await super().setup()
        # Picks up the session cookie; the client's jar keeps it updated.
        await self.client.get(self.config.path)

    @property
    def failure_redirects(self) -> set[str]:
        if self.config.failure_redirect:
            return {self.config.failure_redirect}
        return {self.config.path, self.url_for(self.config.path)}

    async def attempt(self, username: str, password: str) -> bool:
        response = await self.client.request(
            self.config.method,
            self.config.path,
            data={
                self.config.username_param: username,
                self.config.password_param: password,
            },
        )
        return self.is_success(response)

    def is_success(self, response: httpx.Response) -> bool:
        config = self.config
        if config.failure_status is not None and response.status_code != config.failure_status:
            return True
        if config.failure_string is not None and config.failure_string not in response.text:
            return True
        if response.is_redirect:
            return response.headers.get("Location", "") not in self.failure_redirects
        if config.success_heuristics and config.failure_status is None and config.failure_string is None:
            return looks_like_login_success(response, config.password_param)
        return False
