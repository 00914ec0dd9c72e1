"""
Shared settings for the prompt engineering scripts.

API keys come from the environment (or a local .env file). They are read
once here and handed to the SDK clients as-is; nothing checks them
locally, a bad key only shows up when the remote API rejects the call.
"""

import logging
import os

import anthropic
import openai
from dotenv import load_dotenv

load_dotenv()

ANTHROPIC = "anthropic"
OPENAI = "openai"

ANTHROPIC_API_KEY = os.getenv("ANTHROPIC_API_KEY")
OPENAI_API_KEY = os.getenv("OPENAI_API_KEY")

ANTHROPIC_MODEL = os.getenv("ANTHROPIC_MODEL", "claude-sonnet-4-20250514")
OPENAI_MODEL = os.getenv("OPENAI_MODEL", "gpt-4o-mini")  # fast and cheap, great for learning

MAX_TOKENS = 1024
JSON_MAX_TOKENS = 2048  # JSON replies are longer

PAUSE_SECONDS = 1.0  # flat pause between examples

LOG_LEVEL = os.getenv("PROMPT_LAB_LOG_LEVEL", "WARNING")


def configure_logging(level=None):
    """Route diagnostic logging to stderr. Results themselves are printed."""
    logging.basicConfig(
        level=(level or LOG_LEVEL).upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def create_client(provider):
    """Create the async SDK client for a provider.

    max_retries=0: every request is exactly one call, failures are not retried.
    """
    if provider == ANTHROPIC:
        return anthropic.AsyncAnthropic(api_key=ANTHROPIC_API_KEY, max_retries=0)
    if provider == OPENAI:
        # An empty key still builds a client; the API answers with 401.
        return openai.AsyncOpenAI(api_key=OPENAI_API_KEY or "", max_retries=0)
    raise ValueError(f"Unknown provider: {provider}")
