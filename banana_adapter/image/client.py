"""Banana upstream client: task submission and status polling.

Processing flow:
    1. POST the generation payload with `visibility: private`.
    2. On HTTP 500 only, resend once with `visibility: public`.
    3. Read `taskId` from the accepted response.
    4. Wait `POLL_INITIAL_DELAY`, then poll the task up to `POLL_MAX_ATTEMPTS`
       times, sleeping `POLL_INTERVAL` between non-terminal reads.

Retry behavior:
    The visibility fallback is the only retry. Poll-call HTTP failures are
    never retried.

Error handling strategy:
    - Rejected generate call -> `SubmissionError` (carries upstream status).
    - Missing `taskId` / completed task without URL -> `UpstreamError`.
    - Non-success status call -> `PollError`.
    - Task state `failed` -> `TaskFailure`.
    - Budget exhausted -> `PollTimeout`.
    - Transport failures propagate as `httpx.RequestError`.

Determinism:
    The attempt budget is fixed; worst-case wall time is
    initial delay + attempts * interval plus per-call latency.
"""

import asyncio
import logging
from typing import Awaitable, Callable

import httpx

from banana_adapter.config import (
    GENERATE_URL,
    POLL_INITIAL_DELAY,
    POLL_INTERVAL,
    POLL_MAX_ATTEMPTS,
    TASK_URL_TEMPLATE,
)
from banana_adapter.image.errors import (
    PollError,
    PollTimeout,
    SubmissionError,
    TaskFailure,
    UpstreamError,
)
from banana_adapter.image.headers import build_headers
from banana_adapter.image.models import GenerationPayload, TaskEnvelope

logger = logging.getLogger(__name__)

Sleep = Callable[[float], Awaitable[None]]

FALLBACK_STATUS = 500


async def _post_generate(
    client: httpx.AsyncClient,
    payload: GenerationPayload,
    session_token: str,
) -> httpx.Response:
    return await client.post(
        GENERATE_URL,
        json=payload.to_wire(),
        headers=build_headers(session_token),
    )


async def submit_generation(
    client: httpx.AsyncClient,
    payload: GenerationPayload,
    session_token: str,
) -> str:
    """Submit a generation task and return its upstream task id.

    Args:
        client: Shared per-request HTTP client.
        payload: Generation payload; `visibility` is switched to `public` in
            place when the fallback fires.
        session_token: Forwarded as the upstream session cookie.

    Returns:
        Opaque task identifier.

    Raises:
        SubmissionError: Final generate response was not successful.
        UpstreamError: Accepted response carried no `taskId`.
    """
    response = await _post_generate(client, payload, session_token)

    if response.status_code == FALLBACK_STATUS:
        logger.warning(
            "Upstream error (retrying with public): %s %s",
            response.status_code,
            response.text,
        )
        payload.visibility = "public"
        response = await _post_generate(client, payload, session_token)

    if not response.is_success:
        logger.error("Upstream error: %s %s", response.status_code, response.text)
        raise SubmissionError("Upstream request failed", response.status_code)

    task_id = response.json().get("taskId")
    if not task_id:
        raise UpstreamError("Upstream response did not include a taskId")

    logger.info("Upstream task accepted: %s (visibility=%s)", task_id, payload.visibility)
    return task_id


async def poll_task_status(
    client: httpx.AsyncClient,
    task_id: str,
    session_token: str,
    *,
    initial_delay: float = POLL_INITIAL_DELAY,
    interval: float = POLL_INTERVAL,
    max_attempts: int = POLL_MAX_ATTEMPTS,
    sleep: Sleep = asyncio.sleep,
) -> str:
    """Poll a task until it reaches a terminal state.

    Args:
        client: Shared per-request HTTP client.
        task_id: Identifier returned by `submit_generation`.
        session_token: Forwarded as the upstream session cookie.
        initial_delay: Wait before the first status read.
        interval: Wait after every non-terminal read.
        max_attempts: Number of status reads before giving up.
        sleep: Awaitable sleep primitive.

    Returns:
        Result image URL of the completed task.
    """
    url = TASK_URL_TEMPLATE.format(task_id=task_id)
    await sleep(initial_delay)

    for attempt in range(1, max_attempts + 1):
        response = await client.get(url, headers=build_headers(session_token, json_body=False))

        if not response.is_success:
            logger.error("Poll error: %s %s", response.status_code, response.text)
            raise PollError(response.status_code)

        task = TaskEnvelope.model_validate(response.json()).task

        if task.state == "completed":
            image_url = task.result.image_url if task.result else None
            if not image_url:
                raise UpstreamError("Upstream task completed without an image URL")
            logger.info("Task %s completed after %d poll(s)", task_id, attempt)
            return image_url

        if task.state == "failed":
            logger.error("Task failed: %s", task.error)
            raise TaskFailure(str(task.error) if task.error else "Task failed")

        logger.debug("Task %s state=%s (attempt %d/%d)", task_id, task.state, attempt, max_attempts)
        await sleep(interval)

    raise PollTimeout()
