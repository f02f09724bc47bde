"""HTTP client for the chat relay."""

import logging

import httpx

from dreamchat.config import Settings

logger = logging.getLogger(__name__)

CHAT_PATH = "/api/chat"


class RelayError(Exception):
    """The relay call failed or returned something other than a result."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class RelayClient:
    """Posts the transcript to the relay and returns the raw model text.

    The httpx client is injected so the relay can be swapped for an ASGI app
    or a mock transport.
    """

    def __init__(self, client: httpx.AsyncClient, path: str = CHAT_PATH):
        self.client = client
        self.path = path

    @classmethod
    def from_settings(cls, settings: Settings) -> "RelayClient":
        return cls(httpx.AsyncClient(base_url=settings.relay_url, timeout=settings.relay_timeout))

    async def complete(self, messages: list[dict]) -> str:
        """Send one request and return the `result` field of the reply."""
        logger.info(f"[RELAY] POST {self.path} with {len(messages)} messages")

        try:
            response = await self.client.post(self.path, json={"messages": messages})
        except httpx.HTTPError as e:
            raise RelayError(f"Relay unreachable: {e}") from e

        try:
            data = response.json()
        except ValueError:
            data = None

        if not response.is_success:
            detail = data.get("error") if isinstance(data, dict) else None
            raise RelayError(
                f"Relay returned {response.status_code}: {detail or response.text}",
                status_code=response.status_code,
            )

        if not isinstance(data, dict):
            raise RelayError("Relay response is not a JSON object", status_code=response.status_code)
        if data.get("error"):
            raise RelayError(f"Relay error: {data['error']}", status_code=response.status_code)

        result = data.get("result")
        if not isinstance(result, str):
            raise RelayError("Relay response has no result", status_code=response.status_code)
        return result

    async def health(self) -> dict:
        """Fetch the relay status; raises RelayError unless it is a JSON object."""
        try:
            response = await self.client.get("/api/health")
            response.raise_for_status()
        except httpx.HTTPError as e:
            raise RelayError(f"Relay health check failed: {e}") from e

        try:
            data = response.json()
        except ValueError:
            data = None
        if not isinstance(data, dict):
            raise RelayError("Relay health response is not a JSON object", status_code=response.status_code)
        return data

    async def aclose(self):
        await self.client.aclose()
