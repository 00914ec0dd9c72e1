"""
Turning API failures into something a learner can act on.

Every failure from the remote API carries an HTTP status code. Nothing is
retried: the script prints the error plus a hint picked by status code and
stops running examples.
"""

import sys

import anthropic
import openai

from prompt_lab import config

# What a script catches at the top level. Anything else is a bug and propagates.
API_ERRORS = (anthropic.APIError, openai.APIError)

ANTHROPIC_BILLING_URL = "https://console.anthropic.com/settings/billing"

KEY_NAMES = {
    config.ANTHROPIC: "ANTHROPIC_API_KEY",
    config.OPENAI: "OPENAI_API_KEY",
}

# What the Anthropic SDK raises before sending when no key is configured at all
MISSING_KEY_MESSAGE = "Could not resolve authentication method"


def status_of(error):
    """HTTP status of an API error, or None (e.g. connection failures)."""
    return getattr(error, "status_code", None)


def is_missing_credential(error):
    return isinstance(error, TypeError) and MISSING_KEY_MESSAGE in str(error)


def hint_for(status, provider):
    """Human-readable suggestion for a failed call, or None when there is none."""
    if status in (401, 403):
        return f"Check your {KEY_NAMES[provider]} in the .env file"
    if status == 429:
        return "Rate limit exceeded. Wait a moment and try again."
    if status == 400 and provider == config.ANTHROPIC:
        # Anthropic answers 400 when the credit balance is too low
        return f"Check your Anthropic API credits at: {ANTHROPIC_BILLING_URL}"
    if status in (400, 422):
        return "The request was rejected. Check the model name, max_tokens and response_format schema."
    return None


def report_api_error(error, provider):
    """Print the failure and a targeted hint to stderr. Called once, at the top of a script."""
    message = getattr(error, "message", None) or str(error)
    print(f"Error running examples: {message}", file=sys.stderr)

    # a key that was never set fails like a rejected one
    status = 401 if is_missing_credential(error) else status_of(error)
    hint = hint_for(status, provider)
    if hint:
        print(f"\n⚠️  {hint}", file=sys.stderr)
    else:
        print(f"\n⚠️  Full error: {error!r}", file=sys.stderr)
