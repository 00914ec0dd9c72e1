"""
Request building and transport for both chat APIs.

The two providers disagree on what a prompt can contain:
  - Anthropic: supports PREFILLING (a trailing assistant turn the model
    continues from). JSON output is forced by prefilling "{".
  - OpenAI: does NOT support prefilling. Use FEW-SHOT examples instead,
    and response_format (json_object or json_schema) for JSON output.

Both are modelled as variants of one RequestBuilder interface:
PrimingCapable and FewShotOnly. Each turns a Technique into a ChatRequest,
the ChatRequest into SDK keyword arguments, and sends it in exactly one call.
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from prompt_lab import config

logger = logging.getLogger(__name__)

# OpenAI's basic JSON mode: guarantees valid JSON, not schema compliance
JSON_OBJECT_FORMAT = {"type": "json_object"}


def json_schema_format(name, schema, strict=True):
    """OpenAI structured outputs directive. strict=True enforces the exact schema."""
    return {
        "type": "json_schema",
        "json_schema": {"name": name, "strict": strict, "schema": schema},
    }


@dataclass
class Turn:
    role: str  # "user" | "assistant"
    content: str


@dataclass
class Technique:
    """Which prompting techniques to apply to a task."""

    task: str
    role: str | None = None  # system instruction
    prefill: str | None = None
    examples: list[tuple[str, str]] = field(default_factory=list)  # (question, answer)
    response_format: dict | None = None
    max_tokens: int = config.MAX_TOKENS


@dataclass
class ChatRequest:
    system: str | None
    turns: list[Turn]
    max_tokens: int
    response_format: dict | None = None

    @property
    def prefill(self) -> str | None:
        """Content of a trailing assistant turn, if the request primes the reply."""
        if self.turns and self.turns[-1].role == "assistant":
            return self.turns[-1].content
        return None

    @property
    def expects_json(self) -> bool:
        if self.response_format is not None:
            return True
        prefill = self.prefill
        return prefill is not None and prefill.rstrip().endswith("{")


def _conversation(technique):
    """Few-shot pairs, then the real question."""
    turns = []
    for question, answer in technique.examples:
        turns.append(Turn("user", question))
        turns.append(Turn("assistant", answer))
    turns.append(Turn("user", technique.task))
    return turns


class RequestBuilder(ABC):
    """Builds and sends a chat request in one provider's calling convention."""

    provider: str

    def __init__(self, model):
        self.model = model

    @abstractmethod
    def build(self, technique: Technique) -> ChatRequest:
        ...

    @abstractmethod
    def payload(self, request: ChatRequest) -> dict:
        """Keyword arguments for the SDK call."""

    @abstractmethod
    async def _create(self, client, payload: dict) -> str:
        ...

    async def send(self, client, request: ChatRequest) -> str:
        """One blocking call, no retry. Returns the generated text."""
        payload = self.payload(request)
        logger.debug(
            "Calling %s model=%s turns=%d max_tokens=%d",
            self.provider, self.model, len(request.turns), request.max_tokens,
        )
        return await self._create(client, payload)


class PrimingCapable(RequestBuilder):
    """Anthropic Messages API: system is a separate field, prefill allowed."""

    provider = config.ANTHROPIC

    def build(self, technique):
        if technique.response_format is not None:
            raise ValueError(
                "Anthropic has no response_format; prefill the reply with '{' to force JSON"
            )
        turns = _conversation(technique)
        if technique.prefill:
            turns.append(Turn("assistant", technique.prefill))
        return ChatRequest(
            system=technique.role,
            turns=turns,
            max_tokens=technique.max_tokens,
        )

    def payload(self, request):
        kwargs = {
            "model": self.model,
            "max_tokens": request.max_tokens,
            "messages": [{"role": t.role, "content": t.content} for t in request.turns],
        }
        if request.system:
            kwargs["system"] = request.system
        return kwargs

    async def _create(self, client, payload):
        response = await client.messages.create(**payload)
        # content can be empty when the model stops right after a prefill
        return "".join(block.text for block in response.content if block.type == "text")


class FewShotOnly(RequestBuilder):
    """OpenAI Chat Completions: system is a message, no prefill, response_format allowed."""

    provider = config.OPENAI

    def build(self, technique):
        if technique.prefill:
            raise ValueError(
                "OpenAI does not support prefilling; provide few-shot examples instead"
            )
        return ChatRequest(
            system=technique.role,
            turns=_conversation(technique),
            max_tokens=technique.max_tokens,
            response_format=technique.response_format,
        )

    def payload(self, request):
        messages = []
        if request.system:
            messages.append({"role": "system", "content": request.system})
        messages.extend({"role": t.role, "content": t.content} for t in request.turns)

        kwargs = {
            "model": self.model,
            "max_tokens": request.max_tokens,
            "messages": messages,
        }
        if request.response_format is not None:
            kwargs["response_format"] = request.response_format
        return kwargs

    async def _create(self, client, payload):
        response = await client.chat.completions.create(**payload)
        message = response.choices[0].message
        if message.content is None:
            # structured outputs put a refusal here instead of content
            refusal = getattr(message, "refusal", None)
            if refusal:
                logger.info("Model refused: %s", refusal)
                return refusal
            return ""
        return message.content


def builder_for(provider, model=None):
    """Pick the request builder variant for a provider."""
    if provider == config.ANTHROPIC:
        return PrimingCapable(model or config.ANTHROPIC_MODEL)
    if provider == config.OPENAI:
        return FewShotOnly(model or config.OPENAI_MODEL)
    raise ValueError(f"Unknown provider: {provider}")
