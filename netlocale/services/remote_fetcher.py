"""HTTP fetcher for remote translation files."""

from dataclasses import dataclass

import httpx


@dataclass(frozen=True)
class FetchResponse:
    status_code: int
    body: bytes


class HttpxFetcher:
    """GET a URL and hand back the raw status and body.

    Transport errors propagate as ``httpx.HTTPError``. No timeout is set on
    the client: the resolution engine races every call against its own
    timer and cancels the request when the timer wins.
    """

    def __init__(self, client: httpx.AsyncClient | None = None, headers: dict[str, str] | None = None):
        self._client = client
        self._headers = {"Accept": "application/json", **(headers or {})}

    async def get(self, url: str) -> FetchResponse:
        if self._client is not None:
            resp = await self._client.get(url, headers=self._headers)
        else:
            async with httpx.AsyncClient(timeout=None, follow_redirects=True) as client:
                resp = await client.get(url, headers=self._headers)
        return FetchResponse(status_code=resp.status_code, body=resp.content)
