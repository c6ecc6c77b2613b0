from .schemas import PatientInput, TrialRecord, EligibilityResult, OrchestrationResult
from .rules import check_eligibility, is_adult
