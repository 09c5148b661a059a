from typing import Optional, Protocol

import httpx
from pydantic import ValidationError

from shared.core.exceptions import SyncUnavailable
from time_sync_service.schemas.reference_time import ReferenceTime


class ReferenceClockProvider(Protocol):
    """Answers "what time is it" from an authoritative source."""

    async def fetch(self) -> ReferenceTime: ...


class HttpReferenceClockProvider:
    """Reads the reference instant from a ``GET`` on the time endpoint."""

    def __init__(
        self,
        url: str,
        timeout: float = 5.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.url = url
        self.timeout = timeout
        self._transport = transport

    async def fetch(self) -> ReferenceTime:
        try:
            async with httpx.AsyncClient(
                timeout=self.timeout, transport=self._transport
            ) as client:
                response = await client.get(self.url)
        except httpx.HTTPError as e:
            raise SyncUnavailable(
                f"Reference time request failed: {e}",
                details={"url": self.url},
            ) from e

        if response.status_code != 200:
            raise SyncUnavailable(
                f"Reference time request returned HTTP {response.status_code}",
                details={"url": self.url, "status": response.status_code},
            )

        try:
            return ReferenceTime.model_validate(response.json())
        except (ValueError, ValidationError) as e:
            raise SyncUnavailable(
                "Reference time response is malformed",
                details={"url": self.url},
            ) from e
