# eligibility/rules.py
from typing import List, Sequence
from .schemas import EligibilityResult, PatientInput, TrialRecord

ADULT_AGE_YEARS = 18

def is_adult(age) -> bool:
    # non-numeric ages (unparsed text, lists, objects) count as absent
    if not age or isinstance(age, bool) or not isinstance(age, (int, float)):
        return False
    return age > ADULT_AGE_YEARS

def check_eligibility(patient: PatientInput, trials: Sequence[TrialRecord]) -> List[EligibilityResult]:
    """
    One result per trial, same order. Only the patient's age is considered:
    trial conditions/criteria are not evaluated, so every trial gets the same verdict.
    """
    eligible = is_adult(patient.age)
    return [EligibilityResult(trial_id=t.id, eligible=eligible) for t in trials]
