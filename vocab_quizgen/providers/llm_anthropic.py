from __future__ import annotations

import logging
import os
import time

import anthropic

from vocab_quizgen.errors import ConfigurationError, TransportError
from vocab_quizgen.providers.base import LLMProvider, require_text

log = logging.getLogger("vocab_quizgen.llm")


class AnthropicProvider(LLMProvider):
    def __init__(self, model: str = "claude-sonnet-4-20250514", timeout: float = 300.0, max_tokens: int = 8192):
        api_key = os.environ.get("ANTHROPIC_API_KEY", "")
        if not api_key:
            raise ConfigurationError("ANTHROPIC_API_KEY가 설정되지 않았습니다.")
        self.client = anthropic.AsyncAnthropic(api_key=api_key, timeout=timeout, max_retries=0)
        self.model = model
        self.max_tokens = max_tokens

    async def generate(
        self,
        prompt: str,
        system: str | None = None,
        model: str | None = None,
        temperature: float = 1.0,
    ) -> str:
        model = model or self.model
        kwargs = {}
        if system:
            kwargs["system"] = system
        log.info("── PROMPT (%s) ──\n%s", model, prompt)
        t0 = time.monotonic()
        try:
            message = await self.client.messages.create(
                model=model,
                max_tokens=self.max_tokens,
                temperature=temperature,
                messages=[{"role": "user", "content": prompt}],
                **kwargs,
            )
        except anthropic.APIError as e:
            raise TransportError(f"Anthropic API 오류: {e}") from e
        text = "".join(block.text for block in message.content if getattr(block, "type", "") == "text")
        log.info("── RESPONSE (%.1fs) ──\n%s", time.monotonic() - t0, text)
        return require_text(text, self.name())

    def name(self) -> str:
        return f"anthropic/{self.model}"
