"""Adapter API package.

Architectural role:
- Defines the OpenAI-compatible HTTP boundary.
- Translates chat requests into upstream generation parameters.
- Shapes upstream results into chat-completion responses (JSON or SSE).
"""
