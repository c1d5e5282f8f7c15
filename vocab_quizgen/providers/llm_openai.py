from __future__ import annotations

import logging
import time

import openai

from vocab_quizgen.errors import ConfigurationError, TransportError
from vocab_quizgen.providers.base import LLMProvider, require_text

log = logging.getLogger("vocab_quizgen.llm")


class OpenAIProvider(LLMProvider):
    def __init__(self, api_key: str | None, model: str = "gpt-5-mini", timeout: float = 300.0):
        if not api_key:
            raise ConfigurationError("API 클라이언트가 초기화되지 않았습니다. API 키를 확인하세요.")
        # No client-side retries: a failed call is retried by the user.
        self.client = openai.AsyncOpenAI(api_key=api_key, timeout=timeout, max_retries=0)
        self.model = model

    async def generate(
        self,
        prompt: str,
        system: str | None = None,
        model: str | None = None,
        temperature: float = 1.0,
    ) -> str:
        model = model or self.model
        messages = []
        if system:
            messages.append({"role": "system", "content": system})
        messages.append({"role": "user", "content": prompt})

        log.info("── PROMPT (%s) ──\n%s", model, prompt)
        t0 = time.monotonic()
        try:
            resp = await self.client.chat.completions.create(
                model=model,
                temperature=temperature,
                messages=messages,
            )
        except openai.APITimeoutError as e:
            raise TransportError(f"ChatGPT API 시간 초과: {e}") from e
        except openai.APIError as e:
            raise TransportError(f"ChatGPT API 오류: {e}") from e
        content = resp.choices[0].message.content if resp.choices else None
        log.info("── RESPONSE (%.1fs) ──\n%s", time.monotonic() - t0, content)
        return require_text(content, self.name())

    def name(self) -> str:
        return f"openai/{self.model}"
