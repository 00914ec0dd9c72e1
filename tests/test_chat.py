"""Tests for request building and transport."""

from types import SimpleNamespace

import pytest
from conftest import anthropic_message, openai_completion

from prompt_lab import config
from prompt_lab.chat import (
    JSON_OBJECT_FORMAT,
    ChatRequest,
    FewShotOnly,
    PrimingCapable,
    Technique,
    Turn,
    builder_for,
    json_schema_format,
)
from prompt_lab.schemas import RISK_ASSESSMENT_SCHEMA

EXAMPLES = [("Q1", "A1"), ("Q2", "A2")]

# ---------------------------------------------------------------------------
# builder_for
# ---------------------------------------------------------------------------


class TestBuilderFor:
    def test_anthropic_is_priming_capable(self):
        builder = builder_for(config.ANTHROPIC)
        assert isinstance(builder, PrimingCapable)
        assert builder.model == config.ANTHROPIC_MODEL

    def test_openai_is_few_shot_only(self):
        builder = builder_for(config.OPENAI)
        assert isinstance(builder, FewShotOnly)
        assert builder.model == config.OPENAI_MODEL

    def test_model_override(self):
        assert builder_for(config.OPENAI, model="gpt-4o").model == "gpt-4o"

    def test_unknown_provider(self):
        with pytest.raises(ValueError, match="Unknown provider"):
            builder_for("cohere")


# ---------------------------------------------------------------------------
# ChatRequest
# ---------------------------------------------------------------------------


class TestChatRequest:
    def test_prefill_is_trailing_assistant_turn(self):
        request = ChatRequest(None, [Turn("user", "q"), Turn("assistant", "Start")], 10)
        assert request.prefill == "Start"

    def test_no_prefill_when_last_turn_is_user(self):
        request = ChatRequest(None, [Turn("user", "q"), Turn("assistant", "a"), Turn("user", "q2")], 10)
        assert request.prefill is None

    def test_expects_json_for_brace_prefill(self):
        request = ChatRequest(None, [Turn("user", "q"), Turn("assistant", "{")], 10)
        assert request.expects_json

    def test_expects_json_for_response_format(self):
        request = ChatRequest(None, [Turn("user", "q")], 10, response_format=JSON_OBJECT_FORMAT)
        assert request.expects_json

    def test_plain_text_prefill_is_not_json(self):
        request = ChatRequest(None, [Turn("user", "q"), Turn("assistant", "Based on")], 10)
        assert not request.expects_json

    def test_plain_request_is_not_json(self):
        assert not ChatRequest(None, [Turn("user", "q")], 10).expects_json


# ---------------------------------------------------------------------------
# PrimingCapable (Anthropic)
# ---------------------------------------------------------------------------


class TestPrimingCapable:
    def setup_method(self):
        self.builder = PrimingCapable("claude-test")

    def test_plain_task(self):
        request = self.builder.build(Technique(task="hello"))
        assert self.builder.payload(request) == {
            "model": "claude-test",
            "max_tokens": config.MAX_TOKENS,
            "messages": [{"role": "user", "content": "hello"}],
        }

    def test_role_is_top_level_system(self):
        request = self.builder.build(Technique(task="hello", role="You are X."))
        payload = self.builder.payload(request)
        assert payload["system"] == "You are X."
        assert all(m["role"] != "system" for m in payload["messages"])

    def test_prefill_is_last_assistant_turn(self):
        request = self.builder.build(Technique(task="hello", prefill="{", max_tokens=2048))
        payload = self.builder.payload(request)
        assert payload["messages"][-1] == {"role": "assistant", "content": "{"}
        assert payload["max_tokens"] == 2048
        assert request.prefill == "{"

    def test_examples_alternate_before_task(self):
        request = self.builder.build(Technique(task="real", examples=EXAMPLES, prefill="P"))
        roles = [t.role for t in request.turns]
        assert roles == ["user", "assistant", "user", "assistant", "user", "assistant"]
        assert request.turns[-2].content == "real"

    def test_rejects_response_format(self):
        with pytest.raises(ValueError, match="prefill"):
            self.builder.build(Technique(task="x", response_format=JSON_OBJECT_FORMAT))

    async def test_send_makes_one_call(self, anthropic_client):
        anthropic_client.messages.create.return_value = anthropic_message(" rebar.")
        request = self.builder.build(Technique(task="q", prefill="I recommend"))

        text = await self.builder.send(anthropic_client, request)

        assert text == " rebar."
        anthropic_client.messages.create.assert_awaited_once_with(**self.builder.payload(request))

    async def test_send_empty_content_returns_empty_text(self, anthropic_client):
        anthropic_client.messages.create.return_value = SimpleNamespace(content=[], stop_reason="end_turn")
        request = self.builder.build(Technique(task="q", prefill="{"))
        assert await self.builder.send(anthropic_client, request) == ""

    async def test_send_joins_text_blocks_only(self, anthropic_client):
        anthropic_client.messages.create.return_value = SimpleNamespace(
            content=[
                SimpleNamespace(type="text", text='"a": '),
                SimpleNamespace(type="thinking", thinking="..."),
                SimpleNamespace(type="text", text="1}"),
            ]
        )
        request = self.builder.build(Technique(task="q", prefill="{"))
        assert await self.builder.send(anthropic_client, request) == '"a": 1}'


# ---------------------------------------------------------------------------
# FewShotOnly (OpenAI)
# ---------------------------------------------------------------------------


class TestFewShotOnly:
    def setup_method(self):
        self.builder = FewShotOnly("gpt-test")

    def test_role_is_leading_system_message(self):
        request = self.builder.build(Technique(task="hello", role="You are X."))
        payload = self.builder.payload(request)
        assert payload["messages"][0] == {"role": "system", "content": "You are X."}
        assert payload["messages"][-1] == {"role": "user", "content": "hello"}
        assert "system" not in payload

    def test_few_shot_turns_end_on_user(self):
        request = self.builder.build(Technique(task="real", examples=EXAMPLES))
        payload = self.builder.payload(request)
        assert [m["role"] for m in payload["messages"]] == ["user", "assistant", "user", "assistant", "user"]
        assert payload["messages"][1]["content"] == "A1"

    def test_no_response_format_by_default(self):
        payload = self.builder.payload(self.builder.build(Technique(task="q")))
        assert "response_format" not in payload

    def test_json_schema_format_forwarded(self):
        fmt = json_schema_format("risk_assessment", RISK_ASSESSMENT_SCHEMA)
        payload = self.builder.payload(self.builder.build(Technique(task="q", response_format=fmt)))
        assert payload["response_format"]["type"] == "json_schema"
        assert payload["response_format"]["json_schema"]["strict"] is True
        assert payload["response_format"]["json_schema"]["schema"] is RISK_ASSESSMENT_SCHEMA

    def test_rejects_prefill(self):
        with pytest.raises(ValueError, match="few-shot"):
            self.builder.build(Technique(task="x", prefill="Based on"))

    async def test_send_returns_message_content(self, openai_client):
        openai_client.chat.completions.create.return_value = openai_completion("answer")
        text = await self.builder.send(openai_client, self.builder.build(Technique(task="q")))
        assert text == "answer"
        openai_client.chat.completions.create.assert_awaited_once()

    async def test_send_empty_content_returns_empty_text(self, openai_client):
        openai_client.chat.completions.create.return_value = openai_completion(None)
        assert await self.builder.send(openai_client, self.builder.build(Technique(task="q"))) == ""

    async def test_send_returns_refusal_when_content_is_missing(self, openai_client):
        openai_client.chat.completions.create.return_value = openai_completion(None, refusal="No.")
        assert await self.builder.send(openai_client, self.builder.build(Technique(task="q"))) == "No."
