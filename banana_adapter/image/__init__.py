"""Upstream image-generation package.

Scope:
    Drives the banana image service: input-image encoding, the generate call
    with its single visibility fallback, and the bounded task polling loop.

Non-goals:
    - No image processing or decoding.
    - No retries beyond the public-visibility fallback.
"""
