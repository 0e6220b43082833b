from __future__ import annotations

import os


# Central routing for LLM use-cases. Keys are use_case identifiers consumed by
# services/llm_client.py; per-route models can be overridden via env vars.
ROUTES: dict[str, dict] = {
    # Condense a target contact's LinkedIn summary to a short phrase
    "summary_condensation": {
        "model": os.getenv("OPENAI_MODEL_CONDENSE"),  # falls back to global OPENAI_MODEL
        "temperature": 0.7,
        "max_tokens": 20,
        # Logical operation name for logging (not a vendor API name)
        "operation": "summary_condensation",
    },
}
