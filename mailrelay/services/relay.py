"""
Workflow Webhook Relay
Forwards a user's filter payload to the n8n webhook and hands back its answer.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import Any, Optional

import httpx

from ..core import HTTP_TIMEOUT, N8N_WEBHOOK_URL, UpstreamError

logger = logging.getLogger("mailrelay.services.relay")


@dataclass(frozen=True)
class RelayResponse:
    """Upstream answer: parsed JSON when declared and valid, raw text otherwise."""

    status_code: int
    body: Any
    is_json: bool
    content_type: str = ""


class WebhookRelay:
    def __init__(
        self,
        url: str = N8N_WEBHOOK_URL,
        *,
        timeout: float = HTTP_TIMEOUT,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.url = url
        self.timeout = timeout
        self._transport = transport

    async def process(self, user_id: str, filtros: Any) -> RelayResponse:
        """POST ``{userId, filtros}`` once; transport failures raise UpstreamError."""

        payload = {"userId": user_id, "filtros": filtros}
        async with httpx.AsyncClient(
            timeout=self.timeout, transport=self._transport
        ) as client:
            try:
                r = await client.post(
                    self.url,
                    json=payload,
                    headers={"accept": "application/json"},
                )
            except httpx.HTTPError as exc:
                logger.error("Webhook call for user %s failed: %s", user_id, exc)
                raise UpstreamError(f"Webhook unreachable: {exc}") from exc

        content_type = r.headers.get("content-type", "")
        text = r.text
        logger.info("Webhook answered %s for user %s", r.status_code, user_id)

        if r.is_success and "application/json" in content_type:
            try:
                return RelayResponse(r.status_code, json.loads(text), True, content_type)
            except ValueError:
                logger.warning("Webhook declared JSON but sent an unparseable body")
        return RelayResponse(r.status_code, text, False, content_type)


__all__ = ["RelayResponse", "WebhookRelay"]
