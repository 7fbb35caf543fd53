"""OpenAI-compatible response shaping.

Response formatting:
- Non-stream mode returns one `chat.completion` envelope with zeroed usage.
- Stream mode yields exactly two `chat.completion.chunk` SSE frames (content,
  then `finish_reason: "stop"`) followed by the `[DONE]` sentinel.
- Errors use `{"error": {"message", "type", "code"}}`.

Determinism considerations:
- Completion ids (`chatcmpl-` + 16 alphanumerics) and `created` timestamps are
  generated per response.
"""

import json
import random
import string
import time
from typing import Iterator

from fastapi.responses import JSONResponse

from banana_adapter.config import (
    MODEL_CREATED,
    MODEL_OWNER,
    DEFAULT_MODEL,
    SUPPORTED_ASPECT_RATIOS,
    SUPPORTED_SIZES,
)

_ID_ALPHABET = string.ascii_letters + string.digits
SSE_DONE = "data: [DONE]\n\n"


def generate_completion_id() -> str:
    return "chatcmpl-" + "".join(random.choices(_ID_ALPHABET, k=16))


def image_markdown(image_url: str) -> str:
    return f"![image]({image_url})"


def _sse_frame(data: dict) -> str:
    return f"data: {json.dumps(data)}\n\n"


def stream_chunks(image_url: str, model: str) -> Iterator[str]:
    """Yield the SSE frames for one image completion.

    Both chunks share the completion id.
    """
    completion_id = generate_completion_id()

    yield _sse_frame({
        "id": completion_id,
        "object": "chat.completion.chunk",
        "created": int(time.time()),
        "model": model,
        "choices": [
            {
                "index": 0,
                "delta": {"content": image_markdown(image_url)},
                "finish_reason": None
            }
        ]
    })
    yield _sse_frame({
        "id": completion_id,
        "object": "chat.completion.chunk",
        "created": int(time.time()),
        "model": model,
        "choices": [
            {
                "index": 0,
                "delta": {},
                "finish_reason": "stop"
            }
        ]
    })
    yield SSE_DONE


def completion_body(image_url: str, model: str) -> dict:
    """Build a non-stream `chat.completion` envelope."""
    return {
        "id": generate_completion_id(),
        "object": "chat.completion",
        "created": int(time.time()),
        "model": model,
        "choices": [
            {
                "index": 0,
                "message": {"role": "assistant", "content": image_markdown(image_url)},
                "finish_reason": "stop"
            }
        ],
        "usage": {
            "prompt_tokens": 0,
            "completion_tokens": 0,
            "total_tokens": 0
        }
    }


def error_response(message: str, status: int = 500) -> JSONResponse:
    return JSONResponse(
        status_code=status,
        content={
            "error": {
                "message": message,
                "type": "server_error",
                "code": status
            }
        },
    )


def model_catalog() -> dict:
    """Return every size/aspect-ratio variant as OpenAI-style model metadata."""
    return {
        "object": "list",
        "data": [
            {
                "id": f"{DEFAULT_MODEL}-{size}-{ratio}",
                "object": "model",
                "created": MODEL_CREATED,
                "owned_by": MODEL_OWNER
            }
            for size in SUPPORTED_SIZES
            for ratio in SUPPORTED_ASPECT_RATIOS
        ]
    }
