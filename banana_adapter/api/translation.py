"""Request translation from OpenAI chat payloads to generation parameters.

Model id grammar:
    `<base>-<size>-<ratio>` in any token order, for example
    `gemini-3-pro-image-preview-1k-9:16`. Unknown tokens are ignored; each
    matching token overwrites the previous match of its category.

Message handling:
    Only the last message is consulted and it must come from the user.
    String content is the prompt; list content contributes the last `text`
    part as prompt and every `image_url` part as an input image, in order.
"""

from dataclasses import dataclass, field

from banana_adapter.config import (
    DEFAULT_ASPECT_RATIO,
    DEFAULT_MODEL,
    DEFAULT_SIZE,
    SUPPORTED_ASPECT_RATIOS,
    SUPPORTED_SIZES,
)


@dataclass
class ModelParams:
    size: str
    aspect_ratio: str


@dataclass
class UserContent:
    text: str = ""
    images: list[str] = field(default_factory=list)


def resolve_model_name(body: dict) -> str:
    """Return the requested model id, or the default when absent/empty."""
    return body.get("model") or DEFAULT_MODEL


def parse_model_params(model: str) -> ModelParams:
    """Extract size and aspect ratio tokens from a model id.

    Returns:
        `ModelParams` with an upper-cased size (default `2K`) and aspect
        ratio (default `16:9`).
    """
    size = DEFAULT_SIZE
    aspect_ratio = DEFAULT_ASPECT_RATIO

    for part in model.split("-"):
        if part in SUPPORTED_SIZES:
            size = part
        elif part in SUPPORTED_ASPECT_RATIOS:
            aspect_ratio = part

    return ModelParams(size=size.upper(), aspect_ratio=aspect_ratio)


def extract_user_content(messages) -> UserContent:
    """Extract prompt text and input images from the last chat message.

    Raises:
        ValueError: No messages, or the last message is not from the user.
    """
    if not messages or not isinstance(messages, list):
        raise ValueError("No messages provided")

    last_message = messages[-1]
    if not isinstance(last_message, dict) or last_message.get("role") != "user":
        raise ValueError("Last message must be from user")

    content = last_message.get("content")
    result = UserContent()

    if isinstance(content, str):
        result.text = content
    elif isinstance(content, list):
        for item in content:
            if not isinstance(item, dict):
                continue
            if item.get("type") == "text":
                result.text = item.get("text") or ""
            elif item.get("type") == "image_url":
                image_url = item.get("image_url") or {}
                url = image_url.get("url") if isinstance(image_url, dict) else image_url
                if url:
                    result.images.append(url)

    return result
