from fastapi.testclient import TestClient

from main import app

client = TestClient(app)

HEATMAP_BODY = {
    "analysis": {
        "ranked_risks": [
            {
                "id": "r1",
                "title": "Weak system design",
                "severity": "critical",
                "rationale": "No architecture trade-offs discussed",
            },
        ],
    },
    "score_breakdown": {
        "hard_requirement_match": 70,
        "evidence_depth": 60,
        "round_readiness": 55,
        "resume_clarity": 80,
        "company_proxy": 50,
    },
    "extracted_jd": {
        "seniority_signals": ["Senior level"],
        "job_title": "Senior Software Engineer",
    },
}


def test_health():
    response = client.get("/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ok"
    assert data["heatmap_version"] == "v0.1"


def test_heatmap():
    response = client.post("/heatmap", json=HEATMAP_BODY)
    assert response.status_code == 200
    data = response.json()
    heatmap = data["heatmap"]
    assert heatmap["inferred_seniority"] == "Senior"
    assert heatmap["seniority_label"] == "L5-L6 / Senior Level"
    assert heatmap["total_domains"] == 8
    assert len(heatmap["entries"]) == 8
    assert heatmap["critical_gaps"] + heatmap["warning_gaps"] + heatmap["pass_count"] == 8
    entry = heatmap["entries"][0]
    assert set(entry) == {
        "domain", "raw_score", "your_level", "target_benchmark",
        "target_score", "gap_status", "gap_points",
    }
    assert entry["gap_status"] in ("Critical", "Warning", "Pass")
    assert data["company_difficulty"] is None


def test_heatmap_resolves_company():
    body = dict(HEATMAP_BODY, company_name="Meta", experience_level="intern")
    response = client.post("/heatmap", json=body)
    assert response.status_code == 200
    difficulty = response.json()["company_difficulty"]
    assert difficulty["tier"] == "FAANG_PLUS"
    assert difficulty["is_intern"] is True


def test_heatmap_unknown_severity_tolerated():
    body = dict(HEATMAP_BODY)
    body["analysis"] = {"ranked_risks": [{"title": "System design", "severity": "urgent"}]}
    response = client.post("/heatmap", json=body)
    assert response.status_code == 200


def test_heatmap_requires_score_breakdown():
    response = client.post("/heatmap", json={"extracted_jd": {}})
    assert response.status_code == 422


def test_company_difficulty():
    response = client.post("/company-difficulty", json={"company_name": "Goldman Sachs"})
    assert response.status_code == 200
    data = response.json()
    assert data["tier"] == "TOP_FINANCE"
    assert data["difficulty_score"] == 135


def test_company_difficulty_rejects_blank_name():
    response = client.post("/company-difficulty", json={"company_name": "   "})
    assert response.status_code == 400


def test_heatmap_rejects_non_finite_scores():
    response = client.post(
        "/heatmap",
        content='{"score_breakdown": {"hard_requirement_match": 1e400}}',
        headers={"Content-Type": "application/json"},
    )
    assert response.status_code == 422
