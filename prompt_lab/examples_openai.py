"""
Prompt Engineering Examples (OpenAI)
====================================
The same lessons as examples_anthropic, adapted to what OpenAI supports.

IMPORTANT: OpenAI vs Anthropic differences
  PREFILLING:
    - Anthropic: supported (assistant message auto-continues)
    - OpenAI: NOT supported. Alternative: FEW-SHOT examples
  JSON OUTPUT:
    - Anthropic: prefill with "{"
    - OpenAI: response_format (json_object or json_schema)

Docs:
  - https://platform.openai.com/docs/guides/chat-completions
  - https://platform.openai.com/docs/guides/structured-outputs

Run: python -m prompt_lab.examples_openai
"""

import asyncio

from pydantic import ValidationError

from prompt_lab import config
from prompt_lab.chat import JSON_OBJECT_FORMAT, Technique, builder_for, json_schema_format
from prompt_lab.output import banner, handle_reply
from prompt_lab.runner import run_examples
from prompt_lab.schemas import RISK_ASSESSMENT_SCHEMA, RISK_PROJECT, RiskAssessment

builder = builder_for(config.OPENAI)

COST_ESTIMATOR = "You are a seasoned construction cost estimator with 20 years of experience in Honduras."
SAFETY_INSPECTOR = "You are a safety inspector with expertise in construction site regulations in Central America."

# Two Q&A pairs that teach the ✓/✗ recommendation format
RECOMMENDATION_EXAMPLES = [
    (
        "What material is best for roof framing?",
        "✓ RECOMMENDATION: Steel trusses\n"
        "✗ NOT RECOMMENDED: Wood beams\n"
        "REASON: Steel provides better durability in humid climates.",
    ),
    (
        "Should I use concrete blocks or bricks?",
        "✓ RECOMMENDATION: Concrete blocks\n"
        "✗ NOT RECOMMENDED: Clay bricks\n"
        "REASON: Concrete blocks are more cost-effective and faster to install.",
    ),
]

INSPECTION_EXAMPLES = [
    (
        "Inspect: Workers not wearing hard hats, ladder unstable.",
        """🚨 SAFETY VIOLATION REPORT

Critical Issues:
1. [HIGH] Missing PPE - Hard hats required
2. [MEDIUM] Unstable ladder - Fall hazard

Required Actions:
- Stop work immediately
- Provide PPE to all workers
- Replace ladder before continuing""",
    ),
    (
        "Inspect: Workers not wearing gloves. Not wearing harness on height.",
        """
Critical Issues:
1. [HIGH] Missing PPE - Harness required while working at height
2. [MEDIUM] Missing Gloves - Hand protection needed

Required Actions:
- Stop work immediately
- Provide PPE to all workers
- Enforce harness use at heights before continuing""",
    ),
]

SITE_SCENARIO = (
    "Inspect this construction site: Workers are mixing concrete without proper PPE, "
    "scaffolding has no guardrails, and electrical cables are exposed near water."
)


async def _ask(client, technique, schema=None):
    request = builder.build(technique)
    text = await builder.send(client, request)
    return handle_reply(request, text, schema=schema)


async def example1_role_prompting(client):
    banner("EXAMPLE 1: ROLE PROMPTING ONLY", "Using system message to define the AI's role")

    technique = Technique(
        task="What is the average cost per square meter for building a concrete foundation in Honduras?",
        role=COST_ESTIMATOR,
    )
    print("System Role: Construction cost estimator")
    print("\nResponse:")
    return await _ask(client, technique)


async def example2_few_shot(client):
    """OpenAI's alternative to prefilling: show the format, don't start it."""
    banner("EXAMPLE 2: FEW-SHOT LEARNING", "Teaching the AI a specific format through examples")
    print("⚠️  Note: OpenAI does NOT support prefilling like Anthropic.")
    print("Instead, use few-shot learning (example conversations)\n")

    technique = Technique(
        task="What is your opinion on using rebar vs fiber reinforcement in concrete slabs?",
        examples=RECOMMENDATION_EXAMPLES,
    )
    print(f"Technique: Provided {len(RECOMMENDATION_EXAMPLES)} example Q&A pairs to teach format")
    print("\nResponse (should follow the ✓/✗ format):")
    return await _ask(client, technique)


async def example3_role_and_few_shot(client):
    banner("EXAMPLE 3: ROLE + FEW-SHOT COMBINED", "Combining system role with example-based learning")

    technique = Technique(task=SITE_SCENARIO, role=SAFETY_INSPECTOR, examples=INSPECTION_EXAMPLES)
    print("System Role: Safety inspector")
    print(f"Few-shot: {len(INSPECTION_EXAMPLES)} example inspection reports")
    print("\nResponse (should follow report format):")
    return await _ask(client, technique)


async def example4_json_object_mode(client):
    banner("EXAMPLE 4: JSON OBJECT MODE (Basic)", 'Using response_format: { type: "json_object" }')

    technique = Technique(
        task=RISK_PROJECT,
        role=(
            "You are an expert civil engineer. Provide a risk assessment in JSON format with these fields: "
            "projectName, riskLevel, risks (array), estimatedDelay, budgetImpact, recommendations (array)."
        ),
        response_format=JSON_OBJECT_FORMAT,
        max_tokens=config.JSON_MAX_TOKENS,
    )
    print('Method: response_format: { type: "json_object" }')
    print("✅ Guarantees valid JSON")
    print("⚠️  Does NOT guarantee schema compliance\n")
    print("JSON Response:")
    return await _ask(client, technique)


async def example5_structured_outputs(client):
    """json_schema with strict=True: the reply must match the schema exactly."""
    banner(
        "EXAMPLE 5: STRUCTURED OUTPUTS WITH JSON SCHEMA (Best Practice)",
        "Using json_schema for guaranteed schema compliance",
    )
    print("📚 Docs: https://platform.openai.com/docs/guides/structured-outputs\n")

    technique = Technique(
        task=RISK_PROJECT,
        role="You are an expert civil engineer specializing in risk assessment for construction projects.",
        response_format=json_schema_format("risk_assessment", RISK_ASSESSMENT_SCHEMA),
        max_tokens=config.JSON_MAX_TOKENS,
    )
    print("Method: json_schema with strict: true")
    print("✅ Guarantees valid JSON")
    print("✅ Guarantees exact schema compliance")
    print("✅ Type-safe responses\n")
    print("JSON Response:")
    parsed = await _ask(client, technique, schema=RISK_ASSESSMENT_SCHEMA)

    if parsed is not None:
        try:
            assessment = RiskAssessment.model_validate(parsed)
            print(f"\nParsed into RiskAssessment: riskLevel={assessment.riskLevel}, {len(assessment.risks)} risks")
        except ValidationError as e:
            print(f"\n⚠️  VALIDATION FAILED:\n{e}")
    return parsed


EXAMPLES = [
    ("role prompting", example1_role_prompting),
    ("few-shot", example2_few_shot),
    ("role + few-shot", example3_role_and_few_shot),
    ("json_object mode", example4_json_object_mode),
    ("json_schema mode", example5_structured_outputs),
]

TAKEAWAYS = [
    "System message = Define AI role and expertise",
    "Few-shot learning = Teach format through examples (NOT prefilling)",
    "json_object mode = Valid JSON (basic)",
    "json_schema mode = Exact schema compliance (recommended)",
    "OpenAI does NOT support prefilling like Anthropic",
]


async def main():
    config.configure_logging()
    print("\n🎓 PROMPT ENGINEERING EXAMPLES (OpenAI)")
    print("Learning: Role Prompting + Few-Shot Learning + JSON Output\n")

    client = config.create_client(config.OPENAI)
    await run_examples(client, EXAMPLES, config.OPENAI, TAKEAWAYS)


if __name__ == "__main__":
    asyncio.run(main())
