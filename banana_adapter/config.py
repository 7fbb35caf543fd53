"""Runtime configuration for the adapter.

Architectural role:
    Centralizes upstream endpoints, polling budget, and model catalog constants
    consumed by `banana_adapter.api` and `banana_adapter.image`.

Determinism:
    Values are resolved once at import time from the process environment and an
    optional `.env` file.
"""

import os
from dotenv import load_dotenv

load_dotenv()

# Upstream image service. Also used as `Origin` / `Referer` for outbound calls.
BANANA_BASE_URL = os.getenv("BANANA_BASE_URL", "https://banana.listenhub.ai").rstrip("/")
GENERATE_URL = f"{BANANA_BASE_URL}/api/images/generate"
TASK_URL_TEMPLATE = BANANA_BASE_URL + "/api/images/{task_id}"

# Polling budget: initial delay + POLL_MAX_ATTEMPTS * POLL_INTERVAL (~190s).
POLL_INITIAL_DELAY = float(os.getenv("POLL_INITIAL_DELAY", "10"))
POLL_INTERVAL = float(os.getenv("POLL_INTERVAL", "3"))
POLL_MAX_ATTEMPTS = int(os.getenv("POLL_MAX_ATTEMPTS", "60"))

# Per-call timeout for upstream calls and input-image fetches (seconds).
UPSTREAM_TIMEOUT = float(os.getenv("UPSTREAM_TIMEOUT", "120"))

# Model catalog.
DEFAULT_MODEL = "gemini-3-pro-image-preview"
MODEL_CREATED = 1677610602
MODEL_OWNER = "banana"

SUPPORTED_SIZES = ("1k", "2k", "4k")
SUPPORTED_ASPECT_RATIOS = ("1:1", "16:9", "9:16", "4:3", "3:4")
DEFAULT_SIZE = "2k"
DEFAULT_ASPECT_RATIO = "16:9"

# Server settings consumed by `banana_adapter.api.main`.
HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "8000"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# Verbose payload logging is opt-in.
DEBUG = os.getenv("DEBUG") == "true"
