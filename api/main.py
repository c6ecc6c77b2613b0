# api/main.py
from typing import List
from pydantic import BaseModel, Field
from fastapi import FastAPI, Request
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import JSONResponse, RedirectResponse
from fastapi.middleware.cors import CORSMiddleware

from config.logging_config import quick_setup
from config.settings import config
from eligibility import PatientInput
from trial_orchestrator import TrialOrchestrator

logger = quick_setup("trial_eligibility_api")

# ==============================
# Orchestrator (credential read once, at startup)
# ==============================
orchestrator = TrialOrchestrator()

# ==============================
# Models
# ==============================
class Trial(BaseModel):
    id: str
    title: str
    condition: str
    location: str

class TrialEligibility(BaseModel):
    trial_id: str = Field(..., alias="trialId")
    eligible: bool

class EligibilityResponse(BaseModel):
    trials: List[Trial]
    eligibility: List[TrialEligibility]
    reasoning: str

class ErrorResponse(BaseModel):
    error: str

MISSING_FIELDS_ERROR = "Invalid input: 'age' and 'condition' are required"
SERVER_ERROR = "Failed to process request"

# ==============================
# App
# ==============================
app = FastAPI(title="TrialEligibility API (ClinicalTrials.gov + age check + LLM reasoning)", version="1.0.0")

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],      # demo front end
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.on_event("startup")
def _startup_config_check():
    problems = config.validate_config()
    if problems:
        logger.warning(f"Starting with configuration problems: {problems}")


@app.get("/health")
def health():
    return {"ok": True}


@app.get("/api/eligibility", tags=["eligibility"])
def get_eligibility_info():
    return {"message": "Use POST to check eligibility"}


@app.post(
    "/api/eligibility",
    tags=["eligibility"],
    response_model=EligibilityResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def post_eligibility(request: Request):
    """
    Body: {"age": number, "condition": string}. Only these two fields are used.
    400 if either is missing/falsy, 500 on any unexpected failure (malformed JSON included).
    Registry and LLM failures are absorbed downstream (fallback data, static text).
    """
    try:
        payload = await request.json()
        if not isinstance(payload, dict) or not payload.get("age") or not payload.get("condition"):
            return JSONResponse(status_code=400, content={"error": MISSING_FIELDS_ERROR})

        patient = PatientInput.from_payload(payload)
        # blocking pipeline (requests + OpenAI) stays off the event loop
        result = await run_in_threadpool(orchestrator.run, patient)
        return EligibilityResponse(**result.to_dict())

    except Exception as e:
        logger.exception(f"POST /api/eligibility error: {e}")
        return JSONResponse(status_code=500, content={"error": SERVER_ERROR})


@app.get("/llm/health", tags=["llm"])
def llm_health():
    """Reports whether LLM reasoning is active for this process and which model it uses."""
    enabled = orchestrator.reasoner.enabled
    details = {"provider": "OPENAI" if enabled else "STATIC", "model": orchestrator.reasoner.model}
    if not enabled:
        details["note"] = "OPENAI_API_KEY not set; using static reasoning text."

    return JSONResponse(
        content={"status": "ok" if enabled else "warning", "details": details},
        status_code=200
    )


@app.get("/", include_in_schema=False)
def root():
    return RedirectResponse(url="/docs")
