from fastapi.testclient import TestClient

from textsim.api import app

client = TestClient(app)


def test_health():
    assert client.get("/").json() == {"ok": True}
    assert client.get("/healthz").json() == {"status": "ok"}


def test_similarity_endpoint():
    payload = {
        "left_text": "Laravel, PHP; AWS!",
        "right_text": "laravel php aws",
        "round_digits": 12,
    }
    response = client.post("/similarity", json=payload)
    assert response.status_code == 200
    assert response.json() == {"score": 1.0}


def test_similarity_endpoint_disjoint():
    payload = {"left_text": "laravel php mysql", "right_text": "kubernetes terraform helm"}
    response = client.post("/similarity", json=payload)
    assert response.status_code == 200
    assert response.json()["score"] == 0.0


def test_snippet_endpoint_hit():
    payload = {
        "text": "I have worked with Laravel for 5 years.\n\nAlso comfortable with AWS SQS and SNS.",
        "query": "aws",
        "radius": 20,
    }
    response = client.post("/snippet", json=payload)
    assert response.status_code == 200
    data = response.json()
    assert data["found"] is True
    assert "AWS" in data["snippet"]
    assert "\n" not in data["snippet"]


def test_snippet_endpoint_miss():
    payload = {"text": "Experienced backend engineer with Laravel and MySQL.", "query": "Kubernetes", "radius": 40}
    response = client.post("/snippet", json=payload)
    assert response.status_code == 200
    assert response.json() == {"found": False, "snippet": None}


def test_validation_error():
    response = client.post("/similarity", json={"left_text": "python"})
    assert response.status_code == 422
