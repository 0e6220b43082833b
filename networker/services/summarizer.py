from __future__ import annotations

import logging
from typing import Optional

from networker.config.settings import Settings, get_settings
from networker.ports.llm import LLMClientPort

logger = logging.getLogger(__name__)

MAX_WORDS = 4

SYSTEM_PROMPT = (
    "You condense LinkedIn profile summaries into exactly 4 words or less that capture "
    "the essence of the person's professional identity. Return only the condensed phrase, "
    "nothing else."
)


def _clip_words(text: str, limit: int = MAX_WORDS) -> str:
    words = text.strip().strip("\"'").split()
    return " ".join(words[:limit])


class SummaryCondenser:
    """Best-effort condensation of a profile summary into a short phrase.

    Returns None when no OpenAI key is configured or the call fails.
    """

    def __init__(self, llm: Optional[LLMClientPort] = None, settings: Optional[Settings] = None):
        self.settings = settings or get_settings()
        self._llm = llm

    @property
    def llm(self) -> LLMClientPort:
        if self._llm is None:
            from networker.services.llm_client import LLMClient
            self._llm = LLMClient(self.settings)
        return self._llm

    def condense(self, text: str) -> Optional[str]:
        if not self.settings.ai_enabled or not text:
            return None

        user_message = f"Condense this LinkedIn summary to 4 words or less: {text}"
        try:
            resp = self.llm.chat(
                use_case="summary_condensation",
                messages=[
                    {"role": "system", "content": SYSTEM_PROMPT},
                    {"role": "user", "content": user_message},
                ],
                prompt_name="summary_condensation",
                prompt_text=SYSTEM_PROMPT,
            )
            content = resp.choices[0].message.content if resp.choices else None
        except Exception as exc:
            logger.error("Failed to condense summary with OpenAI: %s", exc, extra={"provider": "openai", "status": "error"})
            return None

        condensed = _clip_words(content or "")
        return condensed or None
