"""
TrialEligibility orchestrator

Runs the three steps in strict sequence for one patient:
  1) find trials on ClinicalTrials.gov (fallback data on failure)
  2) age-based eligibility per trial
  3) optional LLM reasoning over the eligibility list
"""

import time
from typing import Optional

import requests

from config.logging_config import get_logger
from eligibility import OrchestrationResult, PatientInput, check_eligibility
from llm_reasoning import ReasoningGenerator
from trial_lookup import find_trials

logger = get_logger(__name__)


class TrialOrchestrator:
    """Stateless per request; holds only the injected reasoner and HTTP session."""

    def __init__(self,
                 reasoner: Optional[ReasoningGenerator] = None,
                 session: Optional[requests.Session] = None):
        self.reasoner = reasoner or ReasoningGenerator.from_config()
        self.session = session
        logger.info(f"TrialOrchestrator initialized (reasoning_enabled={self.reasoner.enabled})")

    def run(self, patient: PatientInput) -> OrchestrationResult:
        t0 = time.time()
        trials = find_trials(patient.condition, session=self.session)
        t1 = time.time()
        eligibility = check_eligibility(patient, trials)
        reasoning = self.reasoner.generate(patient, eligibility)
        t2 = time.time()

        logger.info(
            f"orchestrate condition={patient.condition!r} trials={len(trials)} "
            f"eligible={sum(e.eligible for e in eligibility)} "
            f"lookup_sec={t1 - t0:.2f} reasoning_sec={t2 - t1:.2f}"
        )
        return OrchestrationResult(trials=trials, eligibility=eligibility, reasoning=reasoning)


def orchestrate(patient: PatientInput, orchestrator: Optional[TrialOrchestrator] = None) -> OrchestrationResult:
    """Convenience wrapper: run the pipeline with a config-built orchestrator."""
    return (orchestrator or TrialOrchestrator()).run(patient)
