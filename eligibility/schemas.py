from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

def _parse_number(text: str, default: Any = None) -> Any:
    for cast in (int, float):
        try:
            return cast(text)
        except ValueError:
            continue
    return default

@dataclass(frozen=True)
class PatientInput:
    age: Any
    condition: str

    @classmethod
    def from_payload(cls, payload: Dict[str, Any]) -> "PatientInput":
        """Keep only age + condition; numeric strings for age are coerced, other text is left as-is."""
        age = payload.get("age")
        if isinstance(age, str):
            age = _parse_number(age, default=age)
        return cls(age=age, condition=str(payload.get("condition")))

    def to_dict(self) -> Dict[str, Any]:
        return {"age": self.age, "condition": self.condition}

@dataclass(frozen=True)
class TrialRecord:
    id: str
    title: str
    condition: str
    location: str

    def to_dict(self) -> Dict[str, Any]:
        return {"id": self.id, "title": self.title, "condition": self.condition, "location": self.location}

@dataclass(frozen=True)
class EligibilityResult:
    trial_id: str
    eligible: bool

    def to_dict(self) -> Dict[str, Any]:
        # wire name is camelCase
        return {"trialId": self.trial_id, "eligible": self.eligible}

@dataclass
class OrchestrationResult:
    trials: List[TrialRecord] = field(default_factory=list)
    eligibility: List[EligibilityResult] = field(default_factory=list)
    reasoning: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "trials": [t.to_dict() for t in self.trials],
            "eligibility": [e.to_dict() for e in self.eligibility],
            "reasoning": self.reasoning,
        }
