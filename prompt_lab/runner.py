"""
Running a script's examples one after another.

Each example is awaited to completion before the next starts, with a flat
pause in between. The first API failure (or a missing API key) is reported
once and ends the run.
"""

import asyncio
import logging

from prompt_lab import config
from prompt_lab.errors import API_ERRORS, is_missing_credential, report_api_error
from prompt_lab.output import WIDTH

logger = logging.getLogger(__name__)


async def run_examples(client, examples, provider, takeaways=(), pause=config.PAUSE_SECONDS):
    """Run (name, example_fn) pairs in order. Returns True if all of them ran.

    example_fn is an async function taking the SDK client.
    """
    try:
        for i, (name, example) in enumerate(examples):
            if i:
                await asyncio.sleep(pause)  # brief pause between calls
            logger.info("Running %s", name)
            await example(client)
    except API_ERRORS + (TypeError,) as e:
        if isinstance(e, TypeError) and not is_missing_credential(e):
            raise
        logger.info("Aborting remaining examples after %s", type(e).__name__)
        report_api_error(e, provider)
        return False

    print("\n" + "=" * WIDTH)
    print("✅ ALL EXAMPLES COMPLETED")
    print("=" * WIDTH)
    if takeaways:
        print("\nKey Takeaways:")
        for n, takeaway in enumerate(takeaways, 1):
            print(f"{n}. {takeaway}")
    print()
    return True


async def run_once(client, example, provider):
    """Single-call scripts: same top-level catch, no banner."""
    try:
        await example(client)
    except API_ERRORS + (TypeError,) as e:
        if isinstance(e, TypeError) and not is_missing_credential(e):
            raise
        report_api_error(e, provider)
        return False
    return True
