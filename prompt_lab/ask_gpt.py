"""
Initial LLM call: GPT
=====================
Same question as ask_claude, sent to OpenAI's Chat Completions API.

Run: python -m prompt_lab.ask_gpt
"""

import asyncio

from prompt_lab import config
from prompt_lab.chat import Technique, builder_for
from prompt_lab.output import handle_reply
from prompt_lab.runner import run_once

QUESTION = "Estimate materials for a 100m² concrete slab, 10cm thick"


async def ask_gpt(client, question):
    builder = builder_for(config.OPENAI)
    request = builder.build(Technique(task=question))
    text = await builder.send(client, request)
    return handle_reply(request, text)


async def main():
    config.configure_logging()
    client = config.create_client(config.OPENAI)
    await run_once(client, lambda c: ask_gpt(c, QUESTION), config.OPENAI)


if __name__ == "__main__":
    asyncio.run(main())
