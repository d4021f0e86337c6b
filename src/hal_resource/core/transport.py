import logging
import time
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Tuple, Union

import httpx

from .errors import HALParseError, TransportFailure

Credentials = Union[str, Tuple[str, str], httpx.Auth]

DEFAULT_HEADERS: Mapping[str, str] = MappingProxyType(
    {
        "Accept": "application/hal+json",
        "Content-Type": "application/hal+json",
    }
)


@dataclass(frozen=True)
class TransportConfig:
    headers: Mapping[str, str] = field(default_factory=lambda: dict(DEFAULT_HEADERS))
    timeout_seconds: float = 10.0
    follow_redirects: bool = False


@dataclass(frozen=True)
class TransportResponse:
    status_code: int
    body: Dict[str, Any]
    method: str
    url: str
    text: Optional[str] = None

    @property
    def is_error(self) -> bool:
        return self.status_code >= 400


def to_auth(credentials: Optional[Credentials]) -> Optional[httpx.Auth]:
    """
    Convert credentials into an httpx auth object.
    Accepts 'USER:PASS' strings, (user, password) pairs or ready httpx.Auth.
    """
    if credentials is None or isinstance(credentials, httpx.Auth):
        return credentials
    if isinstance(credentials, str):
        user, _, password = credentials.partition(":")
        return httpx.BasicAuth(user, password)
    if isinstance(credentials, tuple) and len(credentials) == 2:
        return httpx.BasicAuth(*credentials)
    raise TypeError(f"Unsupported credentials type: {type(credentials).__name__}")


class HALTransport:
    """
    Sends one HTTP request and hands back status + parsed JSON body.
    - Default headers come from an immutable TransportConfig, merged per request
    - Error statuses are returned, not raised; callers decide what a failure is
    - No retries: network errors surface immediately as TransportFailure
    """

    def __init__(
        self,
        config: Optional[TransportConfig] = None,
        *,
        logger: Optional[logging.Logger] = None,
        http: Optional[httpx.AsyncClient] = None,
    ):
        self.config = config or TransportConfig()
        self.log = logger or logging.getLogger("hal_resource.transport")

        self._owns_http = http is None
        self.http = http or httpx.AsyncClient(
            timeout=self.config.timeout_seconds,
            follow_redirects=self.config.follow_redirects,
        )

    async def aclose(self) -> None:
        if self._owns_http:
            await self.http.aclose()

    async def __aenter__(self) -> "HALTransport":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()

    def build_headers(
        self, headers: Optional[Mapping[str, str]] = None
    ) -> Dict[str, str]:
        merged = dict(self.config.headers)
        if headers:
            merged.update(headers)
        return merged

    async def request(
        self,
        method: str,
        url: str,
        *,
        headers: Optional[Mapping[str, str]] = None,
        auth: Optional[Credentials] = None,
        json: Optional[Dict[str, Any]] = None,
        expect_json: bool = True,
    ) -> TransportResponse:
        method = method.upper()
        start = time.perf_counter()

        try:
            resp = await self.http.request(
                method,
                url,
                headers=self.build_headers(headers),
                auth=to_auth(auth),
                json=json,
            )
        except httpx.HTTPError as exc:
            raise TransportFailure(
                f"Network/timeout error calling {method} {url}: {exc}",
                method=method,
                url=url,
            ) from exc

        duration_ms = int((time.perf_counter() - start) * 1000)
        self.log.debug(
            "hal.request",
            extra={
                "method": method,
                "url": str(resp.request.url),
                "status": resp.status_code,
                "duration_ms": duration_ms,
            },
        )

        if resp.status_code >= 400:
            body, text = self._lenient_json(resp)
            return TransportResponse(
                status_code=resp.status_code,
                body=body,
                method=method,
                url=str(resp.request.url),
                text=text,
            )

        body = self._safe_json(resp) if expect_json else {}
        return TransportResponse(
            status_code=resp.status_code,
            body=body,
            method=method,
            url=str(resp.request.url),
        )

    def _safe_json(self, resp: httpx.Response) -> Dict[str, Any]:
        # 201/204 without a body
        if not resp.content:
            return {}

        try:
            data = resp.json()
        except ValueError as exc:
            snippet = (resp.text or "")[:500]
            raise HALParseError(
                f"Expected JSON from {resp.request.method} "
                f"{resp.request.url}, got non-JSON body snippet: "
                f"{snippet!r}"
            ) from exc

        if not isinstance(data, dict):
            raise HALParseError(
                f"Expected top-level JSON object from "
                f"{resp.request.method} {resp.request.url}, "
                f"got {type(data).__name__}"
            )
        return data

    @staticmethod
    def _lenient_json(resp: httpx.Response) -> Tuple[Dict[str, Any], Optional[str]]:
        if not resp.content:
            return {}, None
        try:
            parsed = resp.json()
        except ValueError:
            return {}, (resp.text or "")[:500]
        if isinstance(parsed, dict):
            return parsed, None
        return {}, (resp.text or "")[:500]


__all__ = [
    "Credentials",
    "DEFAULT_HEADERS",
    "TransportConfig",
    "TransportResponse",
    "HALTransport",
    "to_auth",
]
