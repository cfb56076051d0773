from fastapi.testclient import TestClient
from app.core.config import settings
from app.main import app

client = TestClient(app)

RESUME = b"""Jane A Smith
jane@x.com
555-123-4567
Work Experience
Senior Engineer
Acme Corp
Built scalable systems for five years.
2018
2023
Education
Bachelor of Science in Computer Science
State University
2017
Skills
javascript, python, leadership
"""


def test_parse_txt_returns_camel_case_resume():
    files = {"file": ("resume.txt", RESUME, "text/plain")}
    r = client.post("/parse", files=files)
    assert r.status_code == 200
    data = r.json()

    assert data["personalInfo"]["name"] == "Jane A Smith"
    assert data["personalInfo"]["email"] == "jane@x.com"
    assert data["experience"][0]["position"] == "Senior Engineer"
    assert data["experience"][0]["startDate"].startswith("2018")
    assert data["education"][0]["institution"] == "State University"
    assert "python" in [s["name"] for s in data["skills"]]
    assert data["parseQuality"] == "high"
    assert data["issues"] == []
    assert 0.0 <= data["confidence"] <= 1.0


def test_parse_markdown_by_extension():
    files = {"file": ("resume.md", RESUME, "application/octet-stream")}
    r = client.post("/parse", files=files)
    assert r.status_code == 200
    assert r.json()["personalInfo"]["phone"] == "555-123-4567"


def test_parse_text_json_body():
    r = client.post("/parse/text", json={"text": RESUME.decode()})
    assert r.status_code == 200
    assert r.json()["categoryConfidence"]["experience"] == 1.0


def test_empty_upload_rejected():
    files = {"file": ("resume.txt", b"", "text/plain")}
    r = client.post("/parse", files=files)
    assert r.status_code == 400


def test_pdf_upload_rejected():
    files = {"file": ("resume.pdf", b"%PDF-1.4 fake", "application/pdf")}
    r = client.post("/parse", files=files)
    assert r.status_code == 415
    assert "converted to plain text" in r.json()["detail"]


def test_unknown_binary_rejected():
    files = {"file": ("resume.bin", b"\x00\x01\x02", "application/octet-stream")}
    r = client.post("/parse", files=files)
    assert r.status_code == 415


def test_oversized_upload_rejected(monkeypatch):
    monkeypatch.setattr(settings, "MAX_UPLOAD_BYTES", 10)
    files = {"file": ("resume.txt", RESUME, "text/plain")}
    r = client.post("/parse", files=files)
    assert r.status_code == 413


def test_health_endpoints():
    assert client.get("/health").json() == {"status": "ok"}
    assert client.get("/").json()["service"] == settings.APP_NAME


def test_analyze_endpoint():
    r = client.post(
        "/analyze",
        json={
            "text": RESUME.decode(),
            "keywords": ["Python", "Java", "leadership"],
            "requiredSkills": ["Python", "Docker"],
        },
    )
    assert r.status_code == 200
    data = r.json()
    assert data["matchedKeywords"] == ["Python", "leadership"]
    assert data["skillsGap"]["matched"] == ["Python"]
    assert data["skillsGap"]["missing"] == ["Docker"]
    assert data["skillsGap"]["matchRate"] == 50.0
    assert "Acme Corp" in data["sections"]["experience"]
