"""
Prompt Engineering Examples (Anthropic)
=======================================
Role prompting, prefilling, and JSON output with Claude.

  1. Role prompting only    - system prompt defines who the model is
  2. Prefill only           - start the reply, the model continues it
  3. Role + prefill         - persona plus a fixed report opening
  4. Role + prefill + JSON  - prefill "{" to force a JSON object

KEY CONCEPT: the API returns only the continuation after a prefill,
so every prefilled example prints prefill + continuation.

Run: python -m prompt_lab.examples_anthropic
"""

import asyncio

from prompt_lab import config
from prompt_lab.chat import Technique, builder_for
from prompt_lab.output import banner, handle_reply
from prompt_lab.runner import run_examples
from prompt_lab.schemas import RISK_ASSESSMENT_SCHEMA, RISK_PROJECT

builder = builder_for(config.ANTHROPIC)

COST_ESTIMATOR = "You are a seasoned construction cost estimator with 20 years of experience in Honduras."
SAFETY_INSPECTOR = "You are a safety inspector with expertise in construction site regulations in Central America."

REINFORCEMENT_QUESTION = "What is your opinion on using rebar vs fiber reinforcement in concrete slabs?"
ENGINEERING_PREFILL = "Based on structural engineering principles, I recommend"

SITE_SCENARIO = (
    "Inspect this construction site scenario: Workers are mixing concrete without proper PPE, "
    "scaffolding has no guardrails, and electrical cables are exposed near water."
)
REPORT_PREFILL = "SAFETY VIOLATION REPORT\n\nCritical Issues Identified:"

RISK_ENGINEER = """You are an expert civil engineer specializing in risk assessment for construction projects in Honduras.

IMPORTANT: You must respond ONLY with valid JSON in this exact format:
{
  "projectName": "string",
  "riskLevel": "low" | "medium" | "high" | "critical",
  "risks": [
    {
      "category": "string",
      "description": "string",
      "severity": 1-10,
      "mitigation": "string"
    }
  ],
  "estimatedDelay": "string",
  "budgetImpact": "string",
  "recommendations": ["string"]
}

Do not include any text outside the JSON structure."""


async def _ask(client, technique, schema=None):
    request = builder.build(technique)
    text = await builder.send(client, request)
    return handle_reply(request, text, schema=schema)


async def example1_role_prompting(client):
    banner("EXAMPLE 1: ROLE PROMPTING ONLY", "Using system prompt to define the AI's role")

    technique = Technique(
        task="What is the average cost per square meter for building a concrete foundation in Honduras?",
        role=COST_ESTIMATOR,
    )
    print("Response:")
    return await _ask(client, technique)


async def example2_prefill(client):
    banner("EXAMPLE 2: PREFILL ONLY", "Using assistant prefill to guide the response direction")

    # No system prompt this time
    technique = Technique(task=REINFORCEMENT_QUESTION, prefill=ENGINEERING_PREFILL)
    print(f'Prefill used: "{ENGINEERING_PREFILL}"')
    print("\nResponse (continues from prefill):")
    return await _ask(client, technique)


async def example3_role_and_prefill(client):
    banner("EXAMPLE 3: ROLE + PREFILL COMBINED", "Combining system prompt (role) with assistant prefill")

    technique = Technique(task=SITE_SCENARIO, role=SAFETY_INSPECTOR, prefill=REPORT_PREFILL)
    print("System Role: Safety inspector with Central America expertise")
    print('Prefill: "SAFETY VIOLATION REPORT\\n\\nCritical Issues Identified:"')
    print("\nResponse:")
    return await _ask(client, technique)


async def example4_all_together(client):
    banner("EXAMPLE 4: ROLE + PREFILL + JSON OUTPUT", "Combining all three techniques for structured JSON response")

    technique = Technique(
        task=RISK_PROJECT,
        role=RISK_ENGINEER,  # role + JSON format instructions
        prefill="{",  # forces the reply to start as a JSON object
        max_tokens=config.JSON_MAX_TOKENS,
    )
    print("System Role: Civil engineer + JSON format requirements")
    print('Prefill: "{"')
    print("\nJSON Response:")
    return await _ask(client, technique, schema=RISK_ASSESSMENT_SCHEMA)


EXAMPLES = [
    ("role prompting", example1_role_prompting),
    ("prefill", example2_prefill),
    ("role + prefill", example3_role_and_prefill),
    ("role + prefill + JSON", example4_all_together),
]

TAKEAWAYS = [
    "System prompt = Define the AI's role and expertise",
    "Prefill = Start the response to guide format/tone",
    "Combine both = Maximum control over output",
    'JSON prefill with "{" = Reliable structured output',
]


async def main():
    config.configure_logging()
    print("\n🎓 PROMPT ENGINEERING EXAMPLES")
    print("Learning: Role Prompting + Prefill + JSON Output\n")

    client = config.create_client(config.ANTHROPIC)
    await run_examples(client, EXAMPLES, config.ANTHROPIC, TAKEAWAYS)


if __name__ == "__main__":
    asyncio.run(main())
