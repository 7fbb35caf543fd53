"""
HTTP API adapter for the banana image service.

Architectural role:
- Expose OpenAI-compatible HTTP interfaces.
- Enforce transport-level checks (bearer token, JSON body).
- Delegate generation to `banana_adapter.image.service.generate_image`.
- Normalize the resulting image URL to JSON or SSE completion contracts.

Endpoint responsibilities:
- `GET /v1/models`: enumerate size x aspect-ratio model variants.
- `POST /v1/chat/completions`: translate, generate, and format one image.
- `GET /healthz`: liveness probe.

API request lifecycle (`POST /v1/chat/completions`):
1. Require `Authorization: Bearer <token>` (401 otherwise).
2. Parse the JSON body (400 otherwise).
3. Extract the last user message and model parameters.
4. Generate upstream and poll until the task is terminal.
5. Format as a single completion or an SSE chunk stream.

Error handling strategy:
- Failures after the JSON parse are answered from one handler as 500,
  including input-validation errors such as a non-user last message.
- A rejected generate call is answered with the upstream status code.
- A polling timeout is answered with its dedicated message.
- Unmatched routes and methods answer a plain-text 404.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exception_handlers import http_exception_handler
from fastapi.responses import PlainTextResponse, StreamingResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from banana_adapter.api.formatting import (
    completion_body,
    error_response,
    model_catalog,
    stream_chunks,
)
from banana_adapter.api.translation import (
    extract_user_content,
    parse_model_params,
    resolve_model_name,
)
from banana_adapter.image.errors import PollTimeout, SubmissionError
from banana_adapter.image.service import generate_image

logger = logging.getLogger(__name__)

app = FastAPI(title="Banana Image Adapter")

BEARER_PREFIX = "Bearer "


@app.exception_handler(StarletteHTTPException)
async def not_found_handler(request: Request, exc: StarletteHTTPException):
    """Answer unknown routes and methods with a generic 404."""
    if exc.status_code in (404, 405):
        return PlainTextResponse("Not Found", status_code=404)
    return await http_exception_handler(request, exc)


@app.get("/healthz")
def healthz():
    return {"status": "ok"}


@app.get("/v1/models")
def list_models():
    """Return the static model catalog; no upstream call is made."""
    return model_catalog()


@app.post("/v1/chat/completions")
async def chat_completions(request: Request):
    """
    OpenAI-compatible chat completions endpoint backed by image generation.

    Input validation behavior:
    - Missing or non-Bearer `Authorization` header -> HTTP 401.
    - Unparsable JSON body -> HTTP 400.
    - Everything else (including a non-user last message) -> HTTP 500.

    The bearer token is not validated here; it is forwarded upstream as the
    session cookie.
    """
    auth_header = request.headers.get("Authorization")
    if not auth_header or not auth_header.startswith(BEARER_PREFIX):
        return error_response("Missing or invalid Authorization header", 401)

    session_token = auth_header[len(BEARER_PREFIX):]

    try:
        body = await request.json()
    except ValueError:
        return error_response("Invalid JSON", 400)

    try:
        if not isinstance(body, dict):
            raise ValueError("Request body must be a JSON object")

        content = extract_user_content(body.get("messages"))
        model_name = resolve_model_name(body)
        params = parse_model_params(model_name)

        image_url = await generate_image(
            content.text,
            content.images,
            params.size,
            params.aspect_ratio,
            session_token,
        )

    except SubmissionError as exc:
        return error_response(str(exc), exc.status_code)
    except PollTimeout:
        logger.error("Timed out waiting for upstream task")
        return error_response("Timeout waiting for image generation", 500)
    except Exception as exc:
        logger.exception("Chat completion failed")
        return error_response(str(exc), 500)

    if body.get("stream") is True:
        return StreamingResponse(
            stream_chunks(image_url, model_name),
            media_type="text/event-stream",
            headers={"Cache-Control": "no-cache", "Connection": "keep-alive"},
        )

    return completion_body(image_url, model_name)
