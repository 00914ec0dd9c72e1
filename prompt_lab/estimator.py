"""
Construction cost estimator
===========================
A role instruction that also pins down the output format: materials,
labor and a total, with a 10% safety factor.

Run: python -m prompt_lab.estimator
"""

import asyncio

from prompt_lab import config
from prompt_lab.chat import Technique, builder_for
from prompt_lab.output import handle_reply
from prompt_lab.runner import run_once

SYSTEM_PROMPT = """You are an expert construction cost estimator.
Provide detailed material and labor estimates in this format:

## Materials
- [Material]: [Quantity] [Unit] @ $[Price/Unit] = $[Total]

## Labor
- [Task]: [Hours] hrs @ $[Rate/hr] = $[Total]

## Total: $[Amount]

Always include safety factor of 10% and explain assumptions."""

PROJECT = "Build a 15m² wooden deck, 2m above ground, with railing"


async def estimate_project(client, description):
    """Return the estimate text (also printed)."""
    builder = builder_for(config.OPENAI)
    request = builder.build(Technique(task=description, role=SYSTEM_PROMPT))
    text = await builder.send(client, request)
    return handle_reply(request, text)


async def main():
    config.configure_logging()
    client = config.create_client(config.OPENAI)
    await run_once(client, lambda c: estimate_project(c, PROJECT), config.OPENAI)


if __name__ == "__main__":
    asyncio.run(main())
