"""HTTP client for the leave-availability advisory.

The endpoint is a Gemini-style `generateContent` call. Every transport,
status or shape problem surfaces as AdvisoryUnavailableError so callers
can degrade to "no advisory" without catching httpx types.
"""

from __future__ import annotations

import logging
from datetime import date
from typing import Any, Optional

import httpx

from ..core.constants import DEFAULT_ADVISORY_TIMEOUT_SECONDS
from ..core.enums import LeaveType
from ..core.exceptions import AdvisoryUnavailableError
from ..employees.model import LeaveCredits
from .model import Advisory, LeaveQuery, build_prompt, parse_advisory

logger = logging.getLogger(__name__)


class AdvisoryClient:
    def __init__(
        self,
        *,
        base_url: str,
        model: str,
        api_key: str = "",
        timeout: float = DEFAULT_ADVISORY_TIMEOUT_SECONDS,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.model = model
        self._api_key = api_key
        self._timeout = timeout
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None

    @property
    def enabled(self) -> bool:
        return bool(self._api_key)

    async def _ensure_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=self.base_url,
                timeout=self._timeout,
                transport=self._transport,
            )
        return self._client

    async def close(self) -> None:
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    async def check(self, query: LeaveQuery) -> Optional[Advisory]:
        """Ask the model about `query`.

        Returns None when the reply carries no known verdict prefix.
        """
        if not self.enabled:
            raise AdvisoryUnavailableError("Advisory API key is not configured")

        client = await self._ensure_client()
        payload = {"contents": [{"parts": [{"text": build_prompt(query)}]}]}
        try:
            resp = await client.post(
                f"/models/{self.model}:generateContent",
                json=payload,
                headers={"x-goog-api-key": self._api_key},
            )
            resp.raise_for_status()
            data = resp.json()
        except httpx.HTTPStatusError as exc:
            raise AdvisoryUnavailableError(f"Advisory call failed with HTTP {exc.response.status_code}") from exc
        except httpx.HTTPError as exc:
            raise AdvisoryUnavailableError(f"Advisory call failed: {exc}") from exc
        except ValueError as exc:
            raise AdvisoryUnavailableError("Advisory reply is not JSON") from exc

        text = _extract_text(data)
        advisory = parse_advisory(text)
        if advisory is None:
            logger.info("Advisory reply has no verdict prefix, ignoring", extra={"employee": query.employee_name})
        return advisory

    async def check_leave_availability(
        self,
        employee_name: str,
        leave_credits: LeaveCredits,
        leave_type: LeaveType,
        start_date: date,
        end_date: date,
    ) -> Optional[Advisory]:
        return await self.check(
            LeaveQuery(
                employee_name=employee_name,
                leave_credits=leave_credits,
                leave_type=leave_type,
                start_date=start_date,
                end_date=end_date,
            )
        )


def _extract_text(data: Any) -> str:
    try:
        parts = data["candidates"][0]["content"]["parts"]
        text = "".join(str(part.get("text", "")) for part in parts)
    except (KeyError, IndexError, TypeError, AttributeError) as exc:
        raise AdvisoryUnavailableError("Advisory reply has an unexpected shape") from exc
    if not text.strip():
        raise AdvisoryUnavailableError("Advisory reply is empty")
    return text
