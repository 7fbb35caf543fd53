"""Input-image normalization for edit requests.

The upstream service only accepts inline images, so remote `image_url` parts
are downloaded and re-encoded as base64 data URIs.

Error handling strategy:
    - Non-success fetch statuses raise `httpx.HTTPStatusError`.
    - Transport failures propagate as `httpx.RequestError` untouched.
"""

import asyncio
import base64

import httpx

DEFAULT_CONTENT_TYPE = "image/png"


async def url_to_base64(url: str, client: httpx.AsyncClient) -> str:
    """Return `url` as a `data:<type>;base64,...` URI.

    Data URIs are returned unchanged. Otherwise the resource is fetched and
    tagged with the response `Content-Type` (default `image/png`).
    """
    if url.startswith("data:"):
        return url

    response = await client.get(url)
    response.raise_for_status()

    content_type = response.headers.get("content-type") or DEFAULT_CONTENT_TYPE
    encoded = base64.b64encode(response.content).decode("ascii")
    return f"data:{content_type};base64,{encoded}"


async def encode_images(urls: list[str], client: httpx.AsyncClient) -> list[str]:
    """Convert every URL concurrently, preserving input order."""
    return list(await asyncio.gather(*(url_to_base64(url, client) for url in urls)))
