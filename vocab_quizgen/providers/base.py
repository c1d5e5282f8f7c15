from __future__ import annotations

from abc import ABC, abstractmethod

from vocab_quizgen.errors import EmptyResponseError


class LLMProvider(ABC):
    @abstractmethod
    async def generate(
        self,
        prompt: str,
        system: str | None = None,
        model: str | None = None,
        temperature: float = 1.0,
    ) -> str:
        """Return the completion text.  ``model=None`` uses the provider default."""
        ...

    @abstractmethod
    def name(self) -> str:
        ...


def require_text(text: str | None, provider: str) -> str:
    if text is None or not text.strip():
        raise EmptyResponseError(f"API가 빈 텍스트를 반환했습니다 ({provider})")
    return text
