"""
Initial LLM call: Claude
========================
The simplest possible request: one user message, plain text back.

Run: python -m prompt_lab.ask_claude
"""

import asyncio

from prompt_lab import config
from prompt_lab.chat import Technique, builder_for
from prompt_lab.output import handle_reply
from prompt_lab.runner import run_once

QUESTION = "Estimate materials for a 100m² concrete slab, 10cm thick"


async def ask_claude(client, question):
    builder = builder_for(config.ANTHROPIC)
    request = builder.build(Technique(task=question))
    text = await builder.send(client, request)
    return handle_reply(request, text)


async def main():
    config.configure_logging()
    client = config.create_client(config.ANTHROPIC)
    await run_once(client, lambda c: ask_claude(c, QUESTION), config.ANTHROPIC)


if __name__ == "__main__":
    asyncio.run(main())
