"""
Configuration
=============
Loads environment variables from .env file using python-dotenv.

Environment Variables:
    OPENROUTER_API_KEY           — Bearer credential for the chat-completion API
    OPENROUTER_BASE_URL          — Upstream base URL (default: OpenRouter v1)
    REVIEWER_MODEL               — Model used for bug detection and optimization
    EXPLAINER_MODEL              — Smaller model used for the explanation step
    UPSTREAM_TIMEOUT_SECONDS     — Per-call timeout for upstream requests (default: 60)
    ENABLE_DEV_ENDPOINT          — Enable /dev/* endpoints (default: false)
    MOCK_ANALYSIS_DELAY_SECONDS  — Simulated latency of /dev/mock-analyze (default: 1.8)
    CORS_ORIGINS                 — Comma-separated list of allowed frontend origins
    LOG_DIR                      — Directory for the daily log file (default: logs)

Missing Credential:
    OPENROUTER_API_KEY is NOT required at startup. A missing key is reported
    per request as a 500 so the server can still boot and serve /health.
"""
import os
from dotenv import load_dotenv

load_dotenv()

OPENROUTER_API_KEY = os.getenv("OPENROUTER_API_KEY")
OPENROUTER_BASE_URL = os.getenv("OPENROUTER_BASE_URL", "https://openrouter.ai/api/v1")

# Models per analysis step
REVIEWER_MODEL = os.getenv("REVIEWER_MODEL", "google/gemma-3-12b-it:free")
EXPLAINER_MODEL = os.getenv("EXPLAINER_MODEL", "google/gemma-3-4b-it:free")

# Timeout in seconds for a single upstream chat-completion call
UPSTREAM_TIMEOUT_SECONDS = float(os.getenv("UPSTREAM_TIMEOUT_SECONDS", 60))

# Dev-only endpoints
ENABLE_DEV_ENDPOINT = os.getenv("ENABLE_DEV_ENDPOINT", "false").lower() == "true"
MOCK_ANALYSIS_DELAY_SECONDS = float(os.getenv("MOCK_ANALYSIS_DELAY_SECONDS", 1.8))

CORS_ORIGINS: list[str] = [
    origin.strip()
    for origin in os.getenv(
        "CORS_ORIGINS", "http://localhost:3000,http://127.0.0.1:3000"
    ).split(",")
    if origin.strip()
]

LOG_DIR = os.getenv("LOG_DIR", "logs")
