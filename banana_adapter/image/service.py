"""Image service dispatcher used by the chat-completions endpoint.

Role in pipeline:
    - Receives translated prompt/images/size/aspect-ratio from the API layer.
    - Builds the upstream `GenerationPayload` (mode derived from images).
    - Encodes input images, submits the task, and polls it to completion.
    - Returns the final image URL to the API layer for formatting.

Error handling strategy:
    - Exceptions from encoding and the upstream client are propagated.

Performance characteristics:
    - One `httpx.AsyncClient` per request; no pooling across requests.
    - Latency is dominated by the polling budget (~190s worst case).
"""

import logging
import json
from typing import Optional

import httpx

from banana_adapter.config import DEBUG, UPSTREAM_TIMEOUT
from banana_adapter.image.client import poll_task_status, submit_generation
from banana_adapter.image.encoding import encode_images
from banana_adapter.image.models import GenerationParams, GenerationPayload

logger = logging.getLogger(__name__)


def build_payload(text: str, size: str, aspect_ratio: str, images: Optional[list[str]] = None) -> GenerationPayload:
    """Assemble a private generation payload; `edit` mode iff images are present."""
    return GenerationPayload(
        prompt=text,
        mode="edit" if images else "t2i",
        visibility="private",
        params=GenerationParams(size=size, aspect_ratio=aspect_ratio),
        images=images or None,
    )


def build_client(transport: Optional[httpx.AsyncBaseTransport] = None) -> httpx.AsyncClient:
    """Per-request client for upstream calls and input-image fetches."""
    return httpx.AsyncClient(
        timeout=UPSTREAM_TIMEOUT,
        follow_redirects=True,
        transport=transport,
    )


async def generate_image(
    text: str,
    images: list[str],
    size: str,
    aspect_ratio: str,
    session_token: str,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> str:
    """Generate one image upstream and return its URL.

    Args:
        text: Prompt text.
        images: Input image URLs or data URIs, in order.
        size: Upper-cased size token (`1K`, `2K`, `4K`).
        aspect_ratio: One of the supported aspect ratios.
        session_token: Caller bearer token, forwarded as upstream session cookie.
        transport: Optional httpx transport override.

    Returns:
        Result image URL.
    """
    async with build_client(transport) as client:
        encoded = await encode_images(images, client) if images else None
        payload = build_payload(text, size, aspect_ratio, encoded)

        logger.info(
            "Upstream payload: %s",
            json.dumps(payload.log_view(), indent=2 if DEBUG else None),
        )

        task_id = await submit_generation(client, payload, session_token)
        return await poll_task_status(client, task_id, session_token)
