from unittest.mock import AsyncMock, patch

from fastapi.testclient import TestClient

from config import settings
from main import app

client = TestClient(app)

JOB = "Looking for Python + FastAPI developer with Docker and CI."
CANDIDATE = "Built REST APIs in FastAPI, containerized with Docker, set up CI."


def _score(**payload):
    body = {"job_text": JOB, "candidate_text": CANDIDATE}
    body.update(payload)
    return client.post("/ats/score", json=body)


def _coach(**payload):
    body = {"job_text": JOB, "candidate_text": CANDIDATE}
    body.update(payload)
    return client.post("/ats/coach", json=body)


def test_health():
    response = client.get("/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ok"
    assert data["coach_configured"] is False


def test_score_docs():
    response = client.get("/ats/score")
    assert response.status_code == 200
    assert response.json()["method"] == "tfidf-1-2gram-cosine"


def test_score():
    response = _score()
    assert response.status_code == 200
    data = response.json()
    assert data["ok"] is True
    assert 0 <= data["score"] <= 1
    assert data["score_pct"] == int(data["score"] * 100 + 0.5)
    assert "fastapi" in data["matches"]
    assert isinstance(data["gaps"], list)
    assert data["meta"]["method"] == "tfidf-1-2gram-cosine"
    assert data["meta"]["vocabulary_size"] > 0
    assert data["meta"]["job_term_count"] >= data["meta"]["vocabulary_size"]
    assert response.headers["X-Quota-Remaining"] == "1"


def test_score_accepts_legacy_field_names():
    response = client.post("/ats/score", json={"jd_text": JOB, "cv_text": CANDIDATE})
    assert response.status_code == 200
    assert response.json()["score"] == _score().json()["score"]


def test_score_missing_input():
    response = client.post("/ats/score", json={"job_text": JOB})
    assert response.status_code == 400
    data = response.json()
    assert data == {"ok": False, "error": "bad_request", "message": data["message"]}
    assert "candidate_text" in data["message"]


def test_score_blank_input():
    response = _score(candidate_text="   ")
    assert response.status_code == 400
    assert response.json()["error"] == "bad_request"


def test_score_no_body():
    response = client.post("/ats/score")
    assert response.status_code == 400
    assert response.json()["error"] == "bad_request"


def test_score_bad_request_does_not_consume_quota():
    client.post("/ats/score", json={})
    assert _score().status_code == 200
    assert _score().status_code == 200


def test_score_quota_exceeded():
    assert _score().status_code == 200
    assert _score().status_code == 200
    response = _score()
    assert response.status_code == 429
    data = response.json()
    assert data["ok"] is False
    assert data["error"] == "quota_exceeded"


def test_owner_bypasses_quota(monkeypatch):
    monkeypatch.setattr(settings, "owner_token", "s3cret")
    headers = {"Authorization": "Bearer s3cret"}
    for _ in range(5):
        response = client.post(
            "/ats/score", json={"job_text": JOB, "candidate_text": CANDIDATE}, headers=headers
        )
        assert response.status_code == 200


def test_wrong_owner_token_is_counted(monkeypatch):
    monkeypatch.setattr(settings, "owner_token", "s3cret")
    headers = {"Authorization": "Bearer guess"}
    body = {"job_text": JOB, "candidate_text": CANDIDATE}
    codes = [client.post("/ats/score", json=body, headers=headers).status_code for _ in range(3)]
    assert codes == [200, 200, 429]


def test_score_internal_error():
    with patch("services.scoring.score_documents", side_effect=RuntimeError("boom")):
        response = _score()
    assert response.status_code == 500
    assert response.json()["error"] == "server_error"


def test_score_upload_text_file():
    response = client.post(
        "/ats/score/upload",
        files={"candidate_file": ("cv.txt", CANDIDATE.encode("utf-8"), "text/plain")},
        data={"job_text": JOB},
    )
    assert response.status_code == 200
    assert response.json()["score"] == _score().json()["score"]


def test_score_upload_rejects_legacy_doc():
    response = client.post(
        "/ats/score/upload",
        files={"candidate_file": ("cv.doc", b"\xd0\xcf\x11\xe0", "application/msword")},
        data={"job_text": JOB},
    )
    assert response.status_code == 400
    assert response.json()["error"] == "bad_request"


def test_score_upload_missing_job_text():
    response = client.post(
        "/ats/score/upload",
        files={"candidate_file": ("cv.txt", b"Python", "text/plain")},
    )
    assert response.status_code == 400


def test_coach_fallback():
    response = _coach(matches=["fastapi", "docker"], gaps=["python"])
    assert response.status_code == 200
    data = response.json()
    assert data["ok"] is True
    coach = data["coach"]
    assert set(coach) == {
        "summary", "strengths", "gaps", "action_bullets",
        "revised_resume_bullets", "tailored_summary", "interview_questions",
    }
    assert coach["strengths"] == ['Solid evidence of "fastapi".', 'Solid evidence of "docker".']


def test_coach_uses_generated_report():
    reply = {
        "summary": "Good fit.",
        "strengths": ["FastAPI"],
        "gaps": ["Python depth"],
        "action_bullets": ["Quantify"],
        "revised_resume_bullets": ["Shipped APIs"],
        "tailored_summary": "Backend engineer.",
        "interview_questions": ["How do you deploy?"],
    }
    with patch("services.coach.gemini_client.generate_json", new_callable=AsyncMock, return_value=reply):
        response = _coach()
    assert response.status_code == 200
    assert response.json()["coach"]["summary"] == "Good fit."


def test_coach_missing_input():
    response = client.post("/ats/coach", json={"candidate_text": CANDIDATE})
    assert response.status_code == 400
    assert response.json()["error"] == "bad_request"


def test_coach_rate_limited():
    assert _coach().status_code == 200
    assert _coach().status_code == 200
    response = _coach()
    assert response.status_code == 429
    assert response.json()["error"] == "rate_limited"


def test_coach_and_score_quotas_are_separate():
    _coach()
    _coach()
    assert _score().status_code == 200


def test_coach_failed():
    with patch("services.coach.coach", new_callable=AsyncMock, side_effect=RuntimeError("boom")):
        response = _coach()
    assert response.status_code == 500
    assert response.json()["error"] == "coach_failed"


def test_usage_status():
    _score()
    response = client.get("/usage/status")
    assert response.status_code == 200
    data = response.json()
    assert data["score"]["used"] == 1
    assert data["score"]["remaining"] == 1
    assert data["coach"]["used"] == 0
    assert data["coach"]["reason"] == "ok"


def test_coach_falls_back_when_client_cannot_be_built(monkeypatch):
    monkeypatch.setattr(settings, "gemini_api_key", "k")
    monkeypatch.setattr("services.gemini_client._client", None)
    with patch("services.gemini_client.genai.Client", side_effect=ValueError("bad client config")):
        response = _coach(matches=["fastapi"], gaps=["python"])
    assert response.status_code == 200
    assert response.json()["coach"]["strengths"] == ['Solid evidence of "fastapi".']


def test_coach_rejects_too_many_hint_terms():
    response = _coach(gaps=[f"term{i}" for i in range(51)])
    assert response.status_code == 400
    assert response.json()["error"] == "bad_request"


def test_coach_rejects_overlong_hint_term():
    response = _coach(matches=["x" * 101])
    assert response.status_code == 400
    assert _coach().status_code == 200


def test_score_failure_refunds_quota():
    with patch("services.scoring.score_documents", side_effect=RuntimeError("boom")):
        assert _score().status_code == 500
        assert _score().status_code == 500
    assert _score().status_code == 200
    assert client.get("/usage/status").json()["score"]["used"] == 1


def test_coach_failure_refunds_quota():
    with patch("services.coach.coach", new_callable=AsyncMock, side_effect=RuntimeError("boom")):
        assert _coach().status_code == 500
        assert _coach().status_code == 500
    assert _coach().status_code == 200


def test_openapi_documents_error_envelope():
    schema = client.get("/openapi.json").json()
    responses = schema["paths"]["/ats/score"]["post"]["responses"]
    assert {"400", "429", "500"} <= set(responses)
    assert "ErrorResponse" in schema["components"]["schemas"]
