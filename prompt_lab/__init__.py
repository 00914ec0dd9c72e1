"""Prompt engineering examples for the Anthropic and OpenAI chat APIs."""
