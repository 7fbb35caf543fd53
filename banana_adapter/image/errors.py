"""Failure types raised while driving the upstream image service.

The HTTP surface maps these to status codes; see
`banana_adapter.api.http_api.chat_completions`.
"""


class AdapterError(RuntimeError):
    """Base class for adapter failures."""


class UpstreamError(AdapterError):
    """Upstream answered with a non-success HTTP status or an unusable body."""

    def __init__(self, message: str, status_code: int = 500):
        super().__init__(message)
        self.status_code = status_code


class SubmissionError(UpstreamError):
    """Generate call rejected, after the visibility fallback when it applied."""


class PollError(UpstreamError):
    """Task status call returned a non-success HTTP status."""

    def __init__(self, status_code: int):
        super().__init__(f"Poll failed: {status_code}", status_code)


class TaskFailure(AdapterError):
    """Upstream reported the task as `failed`."""


class PollTimeout(AdapterError):
    """Task did not reach a terminal state within the polling budget."""

    def __init__(self, message: str = "Timeout waiting for image generation"):
        super().__init__(message)
