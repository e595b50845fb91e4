from unittest.mock import patch

from fastapi.testclient import TestClient

from main import app

client = TestClient(app)

PDF_BYTES = b"%PDF-1.7\n% fake body"
RESUME_TEXT = (
    "Jane Doe, Software Engineer\n"
    "Built web apps with React, NodeJS and Express.\n"
    "Deployed with Docker on AWS. Code on GitHub."
)


def _resume_upload(name="resume.pdf", content=PDF_BYTES, content_type="application/pdf"):
    return {"resume_file": (name, content, content_type)}


def test_health():
    response = client.get("/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ok"
    assert data["taxonomy_size"] > 0


def test_list_job_roles():
    response = client.get("/api/job-roles")
    assert response.status_code == 200
    roles = response.json()
    assert len(roles) == 7
    assert {"id", "title", "description", "required_skills"} <= set(roles[0])


def test_get_job_role():
    response = client.get("/api/job-roles/devops-engineer")
    assert response.status_code == 200
    assert response.json()["title"] == "DevOps Engineer"
    assert client.get("/api/job-roles/astronaut").status_code == 404


def test_ats_match_quick():
    response = client.post(
        "/api/ats-match/quick",
        json={
            "job_description": "We need React, Node.js and MongoDB experience.",
            "resume_text": "Built apps using React and nodejs.",
        },
    )
    assert response.status_code == 200
    data = response.json()
    assert data["required_skills"] == ["mongodb", "node.js", "react"]
    assert data["matched_skills"] == ["node.js", "react"]
    assert data["missing_skills"] == ["mongodb"]
    assert data["match_score"] == 67
    assert data["match_band"] == "medium"
    assert data["suggestions"] == ["Add MongoDB to increase your ATS score"]
    assert 0 <= data["content_score"] <= 100
    assert data["role_id"] is None


def test_ats_match_quick_rejects_blank_job_description():
    response = client.post(
        "/api/ats-match/quick",
        json={"job_description": "   ", "resume_text": "Python"},
    )
    assert response.status_code == 400


def test_ats_match_with_pdf():
    with patch("api.router.pdf_parser.extract_text", return_value=RESUME_TEXT):
        response = client.post(
            "/api/ats-match",
            files=_resume_upload(),
            data={"job_description": "React, Node.js, Express, MongoDB, Docker and Kubernetes."},
        )
    assert response.status_code == 200
    data = response.json()
    assert data["candidate_skills"] == ["aws", "docker", "express", "github", "node.js", "react"]
    assert data["missing_skills"] == ["kubernetes", "mongodb"]
    assert data["match_score"] == 67


def test_ats_match_requires_job_description():
    response = client.post("/api/ats-match", files=_resume_upload(), data={"job_description": ""})
    assert response.status_code == 400
    assert "Job description" in response.json()["detail"]


def test_ats_match_requires_resume():
    response = client.post("/api/ats-match", data={"job_description": "Python"})
    assert response.status_code == 400
    assert "Resume file is required" in response.json()["detail"]


def test_ats_match_rejects_non_pdf():
    response = client.post(
        "/api/ats-match",
        files=_resume_upload("resume.txt", b"not a pdf", "text/plain"),
        data={"job_description": "Python"},
    )
    assert response.status_code == 400


def test_ats_match_rejects_pdf_name_without_pdf_content():
    response = client.post(
        "/api/ats-match",
        files=_resume_upload(content=b"plain text pretending"),
        data={"job_description": "Python"},
    )
    assert response.status_code == 400


def test_ats_match_reports_unparseable_pdf():
    with patch("api.router.pdf_parser.extract_text", side_effect=ValueError("broken xref")):
        response = client.post(
            "/api/ats-match",
            files=_resume_upload(),
            data={"job_description": "Python"},
        )
    assert response.status_code == 400
    assert "Could not parse PDF" in response.json()["detail"]


def test_ats_match_reports_pdf_without_text():
    with patch("api.router.pdf_parser.extract_text", return_value="   "):
        response = client.post(
            "/api/ats-match",
            files=_resume_upload(),
            data={"job_description": "Python"},
        )
    assert response.status_code == 400
    assert "No text" in response.json()["detail"]


def test_ats_match_skills_with_json_list():
    with patch("api.router.pdf_parser.extract_text", return_value=RESUME_TEXT):
        response = client.post(
            "/api/ats-match-skills",
            files=_resume_upload(),
            data={"required_skills": '["React", "nodejs", "Python", "Kubernetes"]'},
        )
    assert response.status_code == 200
    data = response.json()
    assert data["required_skills"] == ["kubernetes", "node.js", "python", "react"]
    assert data["matched_skills"] == ["node.js", "react"]
    assert data["match_score"] == 50


def test_ats_match_skills_with_comma_list():
    with patch("api.router.pdf_parser.extract_text", return_value=RESUME_TEXT):
        response = client.post(
            "/api/ats-match-skills",
            files=_resume_upload(),
            data={"required_skills": "docker, aws"},
        )
    assert response.status_code == 200
    assert response.json()["match_score"] == 100
    assert response.json()["match_band"] == "high"


def test_ats_match_skills_with_role():
    with patch("api.router.pdf_parser.extract_text", return_value=RESUME_TEXT):
        response = client.post(
            "/api/ats-match-skills",
            files=_resume_upload(),
            data={"role_id": "backend-developer"},
        )
    assert response.status_code == 200
    data = response.json()
    assert data["role_id"] == "backend-developer"
    assert data["matched_skills"] == ["docker", "express", "node.js"]
    assert data["match_score"] == 33
    assert len(data["suggestions"]) == len(data["missing_skills"]) == 6


def test_ats_match_skills_unknown_role():
    response = client.post(
        "/api/ats-match-skills",
        files=_resume_upload(),
        data={"role_id": "astronaut"},
    )
    assert response.status_code == 404


def test_ats_match_skills_rejects_empty_list():
    response = client.post(
        "/api/ats-match-skills",
        files=_resume_upload(),
        data={"required_skills": "[]"},
    )
    assert response.status_code == 400


def test_ats_match_skills_rejects_invalid_json():
    response = client.post(
        "/api/ats-match-skills",
        files=_resume_upload(),
        data={"required_skills": '["python",'},
    )
    assert response.status_code == 400
