from __future__ import annotations

import logging
import time

import httpx

from vocab_quizgen.errors import TransportError
from vocab_quizgen.providers.base import LLMProvider, require_text

log = logging.getLogger("vocab_quizgen.llm")


class OllamaProvider(LLMProvider):
    def __init__(self, base_url: str = "http://localhost:11434", model: str = "qwen3:8b", timeout: float = 300.0):
        self.base_url = base_url.rstrip("/")
        self.model = model
        self.timeout = timeout

    async def generate(
        self,
        prompt: str,
        system: str | None = None,
        model: str | None = None,
        temperature: float = 1.0,
    ) -> str:
        model = model or self.model
        body: dict = {
            "model": model,
            "prompt": prompt,
            "stream": False,
            "options": {"temperature": temperature},
        }
        if system:
            body["system"] = system

        log.info("── PROMPT (%s) ──\n%s", model, prompt)
        t0 = time.monotonic()
        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                resp = await client.post(f"{self.base_url}/api/generate", json=body)
                resp.raise_for_status()
                data = resp.json()
        except httpx.TimeoutException as e:
            raise TransportError(f"Ollama 시간 초과: {e}") from e
        except (httpx.HTTPError, ValueError) as e:
            raise TransportError(f"Ollama 오류: {e}") from e
        elapsed = time.monotonic() - t0
        response = data.get("response")
        log.info("── RESPONSE (%.1fs, %s tokens) ──\n%s", elapsed, data.get("eval_count", "?"), response)
        return require_text(response, self.name())

    def name(self) -> str:
        return f"ollama/{self.model}"
