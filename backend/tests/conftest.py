"""Root conftest: shared test configuration."""

import os

# Ensure tests don't accidentally use real API keys or operator config
os.environ["OFFICIAL_EMAIL"] = "operator@example.com"
os.environ["GEMINI_API_KEY"] = "gemini-test-fake-key"
os.environ.setdefault("LOG_FORMAT", "text")
