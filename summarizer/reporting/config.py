"""Configuration constants for the reporting pipeline."""
from __future__ import annotations

import os

# Model id sent to the chat-completions endpoint
LLM_MODEL: str = os.getenv("LLM_MODEL", "llama-3.3-70b-versatile")

# OpenAI-compatible base URL (Groq by default)
LLM_BASE_URL: str = os.getenv("LLM_BASE_URL", "https://api.groq.com/openai/v1")

# Upper bound on a single model call, after which the fallback path is used
LLM_TIMEOUT_SECONDS: float = float(os.getenv("LLM_TIMEOUT_SECONDS", "30"))

# Attempts per model call (retries happen before falling back)
LLM_MAX_ATTEMPTS: int = max(1, int(os.getenv("LLM_MAX_ATTEMPTS", "2")))

# Sampling temperature for the analysis stage
ANALYSIS_TEMPERATURE: float = float(os.getenv("ANALYSIS_TEMPERATURE", "0.3"))

# Sampling temperature for the report prose stage
REPORT_TEMPERATURE: float = float(os.getenv("REPORT_TEMPERATURE", "0.4"))

# strftime pattern for the report date, e.g. "19 October 2026"
REPORT_DATE_FORMAT: str = os.getenv("REPORT_DATE_FORMAT", "{day} %B %Y")

REPORT_TITLE_PREFIX: str = "Placement Drive Feedback Summary Report – "
