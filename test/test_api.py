import pytest
from fastapi.testclient import TestClient

import api.main as main
from conftest import FakeSession, make_response, make_study
from llm_reasoning import STATIC_REASONING, ReasoningGenerator
from trial_orchestrator import TrialOrchestrator

client = TestClient(main.app)


@pytest.fixture
def use_session(monkeypatch):
    def _install(session):
        orch = TrialOrchestrator(reasoner=ReasoningGenerator(api_key=None), session=session)
        monkeypatch.setattr(main, "orchestrator", orch)
        return session
    return _install


def test_get_returns_usage_message():
    r = client.get("/api/eligibility")
    assert r.status_code == 200
    assert r.json() == {"message": "Use POST to check eligibility"}


def test_post_asthma_example(use_session, asthma_session):
    use_session(asthma_session)
    r = client.post("/api/eligibility", json={"age": 30, "condition": "asthma", "name": "dropped"})

    assert r.status_code == 200
    body = r.json()
    assert body["trials"] == [
        {"id": "NCT05550001", "title": "Asthma Trial A", "condition": "Asthma", "location": "Canada"}
    ]
    assert body["eligibility"] == [{"trialId": "NCT05550001", "eligible": True}]
    assert body["reasoning"] == STATIC_REASONING


def test_post_registry_down_still_200(use_session):
    use_session(FakeSession(make_response(502)))
    r = client.post("/api/eligibility", json={"age": 10, "condition": "asthma"})

    assert r.status_code == 200
    body = r.json()
    assert [t["id"] for t in body["trials"]] == ["NCT00000001", "NCT00000002"]
    assert [e["trialId"] for e in body["eligibility"]] == ["NCT00000001", "NCT00000002"]
    assert [e["eligible"] for e in body["eligibility"]] == [False, False]


@pytest.mark.parametrize("payload", [
    {"condition": "asthma"},
    {"age": 30},
    {"age": 0, "condition": "asthma"},
    {"age": 30, "condition": ""},
    {},
    [1, 2],
])
def test_post_missing_fields_is_400_without_outbound_calls(use_session, payload):
    session = use_session(FakeSession(make_response(200, {"studies": []})))
    r = client.post("/api/eligibility", json=payload)

    assert r.status_code == 400
    assert r.json() == {"error": main.MISSING_FIELDS_ERROR}
    assert session.calls == []


def test_post_without_body_is_500():
    r = client.post("/api/eligibility")
    assert r.status_code == 500
    assert r.json() == {"error": "Failed to process request"}


def test_post_malformed_json_is_500_with_error_body(use_session):
    session = use_session(FakeSession(make_response(200, {"studies": []})))
    r = client.post("/api/eligibility", content=b"{not json",
                    headers={"Content-Type": "application/json"})

    assert r.status_code == 500
    assert r.json() == {"error": "Failed to process request"}
    assert session.calls == []


@pytest.mark.parametrize("age", ["30 years", [30], {"years": 30}])
def test_post_non_numeric_age_is_200_and_ineligible(use_session, asthma_session, age):
    use_session(asthma_session)
    r = client.post("/api/eligibility", json={"age": age, "condition": "asthma"})

    assert r.status_code == 200
    body = r.json()
    assert [e["trialId"] for e in body["eligibility"]] == [t["id"] for t in body["trials"]]
    assert [e["eligible"] for e in body["eligibility"]] == [False]


def test_post_numeric_string_age_is_coerced(use_session, asthma_session):
    use_session(asthma_session)
    r = client.post("/api/eligibility", json={"age": "30", "condition": "asthma"})

    assert r.status_code == 200
    assert r.json()["eligibility"] == [{"trialId": "NCT05550001", "eligible": True}]


def test_post_unexpected_failure_is_generic_500(monkeypatch):
    class _Broken:
        def run(self, patient):
            raise RuntimeError("boom: internal detail")

    monkeypatch.setattr(main, "orchestrator", _Broken())
    r = client.post("/api/eligibility", json={"age": 30, "condition": "asthma"})

    assert r.status_code == 500
    assert r.json() == {"error": "Failed to process request"}


def test_health_endpoints():
    assert client.get("/health").json() == {"ok": True}

    r = client.get("/llm/health")
    assert r.status_code == 200
    assert r.json()["details"]["provider"] == "STATIC"


def test_post_registry_numeric_id_is_returned_as_text(use_session):
    study = make_study("placeholder", "Numeric Id Trial", "Asthma", "Canada")
    study["protocolSection"]["identificationModule"]["nctId"] = 123
    use_session(FakeSession(make_response(200, {"studies": [study]})))

    r = client.post("/api/eligibility", json={"age": 30, "condition": "asthma"})

    assert r.status_code == 200
    assert r.json()["eligibility"] == [{"trialId": "123", "eligible": True}]


def test_post_whitespace_condition_is_not_replaced(use_session, asthma_session):
    use_session(asthma_session)
    r = client.post("/api/eligibility", json={"age": 30, "condition": "   "})

    assert r.status_code == 200
    assert asthma_session.calls[0]["params"]["query.term"] == "   "
