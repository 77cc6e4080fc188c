"""Async HTTP client for the summarizer backend.

Wraps the three endpoints the workflow depends on: ``/upload``,
``/summarize`` and ``/email``. Every failure, whether a connection error,
a non-2xx status or a body without ``success: true``, is raised as
TransportError. Its message is a transport-level description; the
response body is never used for the message.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

import httpx

from .errors import TransportError
from .models import SelectedFile, SummaryResult

logger = logging.getLogger("meetsum")


class BackendClient:
    """Client for the summarizer backend.

    Args:
        base_url: Backend API root, e.g. ``https://host/api``.
        timeout: Seconds per request; ``None`` disables client-side timeouts.
        transport: Optional httpx transport, used by tests.
    """

    def __init__(
        self,
        base_url: str,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self._base_url = base_url.rstrip("/") + "/"
        self._timeout = timeout
        self._transport = transport

    @property
    def base_url(self) -> str:
        return self._base_url

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            base_url=self._base_url,
            timeout=self._timeout,
            transport=self._transport,
        )

    async def _post(self, path: str, **kwargs: Any) -> Dict[str, Any]:
        try:
            async with self._client() as client:
                response = await client.post(path, **kwargs)
                response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            raise TransportError(
                f"Request failed with status code {exc.response.status_code}"
            ) from exc
        except httpx.HTTPError as exc:
            raise TransportError(str(exc) or exc.__class__.__name__) from exc

        try:
            data = response.json()
        except ValueError as exc:
            raise TransportError("Invalid response body") from exc

        if not isinstance(data, dict) or data.get("success") is not True:
            raise TransportError("Request was not successful")
        logger.debug("POST %s -> %s", path, response.status_code)
        return data

    @staticmethod
    def _summary_result(data: Dict[str, Any]) -> SummaryResult:
        summary = data.get("summary")
        summary_id = data.get("summaryId")
        if summary is None or summary_id is None:
            raise TransportError("Response is missing summary fields")
        return SummaryResult(summary=str(summary), summary_id=str(summary_id))

    async def upload(self, file: SelectedFile, custom_prompt: str) -> SummaryResult:
        """POST /upload as multipart: ``file`` plus ``customPrompt``."""
        data = await self._post(
            "upload",
            files={"file": (file.name, file.content, file.content_type)},
            data={"customPrompt": custom_prompt},
        )
        return self._summary_result(data)

    async def summarize(self, transcript: str, custom_prompt: str) -> SummaryResult:
        """POST /summarize with a JSON body."""
        data = await self._post(
            "summarize",
            json={"transcript": transcript, "customPrompt": custom_prompt},
        )
        return self._summary_result(data)

    async def send_email(
        self, summary_id: str, recipients: List[str], edited_summary: str
    ) -> None:
        """POST /email; returns once the backend confirms dispatch."""
        await self._post(
            "email",
            json={
                "summaryId": summary_id,
                "recipients": recipients,
                "editedSummary": edited_summary,
            },
        )
