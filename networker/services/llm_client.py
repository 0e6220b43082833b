from __future__ import annotations

import time
from typing import Any, Dict, List, Optional

from networker.config.llm_routes import ROUTES
from networker.config.settings import Settings, get_settings
from networker.utils.llm_logger import log_call, sha256_text

PROVIDER = "openai"


class LLMClient:
    """Minimal wrapper to centralize per-use-case routing and logging."""

    def __init__(self, settings: Optional[Settings] = None) -> None:
        self.settings = settings or get_settings()
        self._client = None

    def _openai(self):
        if self._client is None:
            from openai import OpenAI
            self._client = OpenAI(api_key=self.settings.openai_api_key)
        return self._client

    def chat(
        self,
        *,
        use_case: str,
        messages: List[Dict[str, str]],
        temperature: Optional[float] = None,
        max_tokens: Optional[int] = None,
        prompt_name: Optional[str] = None,
        prompt_text: Optional[str] = None,
    ) -> Any:
        route = ROUTES.get(use_case, {})
        model = route.get("model") or self.settings.openai_model or "gpt-4o-mini"
        op = route.get("operation", "chat")
        temp = temperature if temperature is not None else route.get("temperature")
        limit = max_tokens if max_tokens is not None else route.get("max_tokens")

        kwargs: Dict[str, Any] = {"model": model, "messages": messages}
        # Only pass optional knobs when set (some models only accept defaults)
        if temp is not None:
            kwargs["temperature"] = temp
        if limit is not None:
            kwargs["max_tokens"] = limit

        t0 = time.time()
        try:
            resp = self._openai().chat.completions.create(**kwargs)
        except Exception as exc:
            log_call(
                caller=f"llm_client.chat:{use_case}",
                provider=PROVIDER,
                model=model,
                operation=op,
                prompt_name=prompt_name,
                prompt_hash=sha256_text(prompt_text),
                duration_ms=int((time.time() - t0) * 1000),
                status="error",
                error=str(exc),
                settings=self.settings,
            )
            raise
        duration_ms = int((time.time() - t0) * 1000)

        usage_obj = None
        usage = getattr(resp, "usage", None)
        if usage:
            usage_obj = {
                "prompt_tokens": getattr(usage, "prompt_tokens", None),
                "completion_tokens": getattr(usage, "completion_tokens", None),
                "total_tokens": getattr(usage, "total_tokens", None),
            }

        log_call(
            caller=f"llm_client.chat:{use_case}",
            provider=PROVIDER,
            model=model,
            operation=op,
            prompt_name=prompt_name,
            prompt_hash=sha256_text(prompt_text),
            duration_ms=duration_ms,
            status="ok",
            usage=usage_obj,
            settings=self.settings,
        )
        return resp
