"""Banana image adapter.

Exposes an OpenAI-compatible chat-completions surface in front of the
ListenHub "banana" asynchronous image-generation service.

Composition:
    - `api`: HTTP surface, request translation, and response formatting.
    - `image`: Upstream client, polling loop, and input-image encoding.
    - `config`: Environment-driven runtime settings.
"""
