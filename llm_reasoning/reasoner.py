"""
llm_reasoning/reasoner.py

Turns the patient data + per-trial eligibility into one short, patient-friendly
explanation using an OpenAI chat model.

The credential is injected at construction. Without it the generator never
touches the network and returns a fixed generic sentence; any provider error
is logged and replaced by a fixed apology.

Env (via config.settings, sane defaults):
  OPENAI_API_KEY (unset -> static reasoning)
  LLM_MODEL=gpt-3.5-turbo
  LLM_MAX_TOKENS=200
"""

import json
import time
from typing import Any, Optional, Sequence

from openai import OpenAI

from config.logging_config import get_logger
from config.settings import config
from eligibility.schemas import EligibilityResult, PatientInput

logger = get_logger(__name__)

STATIC_REASONING = "Based on age and provided condition, patient may qualify for selected trials."
EMPTY_REASONING = "No reasoning generated"
ERROR_REASONING = "Unable to generate reasoning at this time. Please try again later."

# -------------------- prompt --------------------
def build_prompt(patient: PatientInput, eligibility: Sequence[EligibilityResult]) -> str:
    lines = [
        f"Patient Data: {json.dumps(patient.to_dict())}",
        f"Trial Eligibility: {json.dumps([e.to_dict() for e in eligibility])}",
        "",
        "Provide a concise, professional explanation for the patient about why they may or may not qualify.",
        "Keep it safe and patient-friendly.",
    ]
    return "\n".join(lines)


class ReasoningGenerator:
    """Optional LLM reasoning; the OpenAI client is created once here and never reconfigured."""

    def __init__(self,
                 api_key: Optional[str] = None,
                 model: str = None,
                 max_tokens: int = None,
                 client: Any = None):
        self.model = model or config.LLM_MODEL
        self.max_tokens = max_tokens or config.LLM_MAX_TOKENS
        if client is not None:
            self._client = client
        elif api_key:
            self._client = OpenAI(api_key=api_key)
        else:
            self._client = None

    @classmethod
    def from_config(cls) -> "ReasoningGenerator":
        return cls(api_key=config.OPENAI_API_KEY,
                   model=config.LLM_MODEL,
                   max_tokens=config.LLM_MAX_TOKENS)

    @property
    def enabled(self) -> bool:
        return self._client is not None

    def generate(self, patient: PatientInput, eligibility: Sequence[EligibilityResult]) -> str:
        if not self.enabled:
            return STATIC_REASONING

        t0 = time.time()
        try:
            resp = self._client.chat.completions.create(
                model=self.model,
                messages=[{"role": "user", "content": build_prompt(patient, eligibility)}],
                max_tokens=self.max_tokens,
            )
            content = resp.choices[0].message.content
        except Exception as e:
            logger.error(f"AI reasoning error (model={self.model}): {e}")
            return ERROR_REASONING

        logger.info(f"generate_reasoning model={self.model} time_sec={time.time() - t0:.2f}")
        return content or EMPTY_REASONING
