from __future__ import annotations

from typing import TYPE_CHECKING

from vocab_quizgen.errors import ConfigurationError

if TYPE_CHECKING:
    from vocab_quizgen.config import Settings
    from vocab_quizgen.providers.base import LLMProvider


def create_provider(settings: Settings, api_key: str | None = None) -> LLMProvider:
    if settings.llm_provider == "openai":
        from vocab_quizgen.providers.llm_openai import OpenAIProvider
        return OpenAIProvider(api_key, model=settings.llm_model, timeout=settings.request_timeout)
    elif settings.llm_provider == "anthropic":
        from vocab_quizgen.providers.llm_anthropic import AnthropicProvider
        return AnthropicProvider(model=settings.llm_model, timeout=settings.request_timeout)
    elif settings.llm_provider == "ollama":
        from vocab_quizgen.providers.llm_ollama import OllamaProvider
        return OllamaProvider(base_url=settings.ollama_url, model=settings.llm_model,
                              timeout=settings.request_timeout)
    raise ConfigurationError(f"Unknown LLM provider: {settings.llm_provider}")
