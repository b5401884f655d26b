"""
Tests for the JSON endpoints
"""


def test_metric_endpoint(client):
    response = client.post("/api/bmi/metric", json={"height_cm": "170", "weight_kg": "70"})

    assert response.status_code == 200
    assert response.json() == {"bmi": "24.2", "category": "Normal"}


def test_metric_endpoint_accepts_numbers(client):
    response = client.post("/api/bmi/metric", json={"height_cm": 160, "weight_kg": 80})

    assert response.status_code == 200
    assert response.json() == {"bmi": "31.2", "category": "Obese"}


def test_metric_endpoint_missing_input(client):
    response = client.post("/api/bmi/metric", json={"weight_kg": "70"})

    assert response.status_code == 422
    assert response.json() == {
        "detail": "Please enter both height and weight.",
        "error_code": "MISSING_INPUT",
    }


def test_metric_endpoint_invalid_height(client):
    response = client.post("/api/bmi/metric", json={"height_cm": "-5", "weight_kg": "70"})

    assert response.status_code == 422
    assert response.json()["error_code"] == "INVALID_HEIGHT"


def test_metric_endpoint_invalid_weight(client):
    response = client.post("/api/bmi/metric", json={"height_cm": "170", "weight_kg": "abc"})

    assert response.status_code == 422
    body = response.json()
    assert body["error_code"] == "INVALID_WEIGHT"
    assert body["detail"] == "Weight must be a positive number."


def test_imperial_endpoint(client):
    response = client.post(
        "/api/bmi/imperial",
        json={"height_feet": "5", "height_inches": "7", "weight_kg": "70"},
    )

    assert response.status_code == 200
    assert response.json() == {"bmi": "24.2", "category": "Normal"}


def test_imperial_endpoint_missing_inches(client):
    response = client.post("/api/bmi/imperial", json={"height_feet": "5", "weight_kg": "70"})

    assert response.status_code == 422
    assert response.json() == {
        "detail": "Please enter all required fields.",
        "error_code": "MISSING_INPUT",
    }


def test_health(client):
    response = client.get("/health")
    assert response.json() == {"status": "ok"}


def test_metric_endpoint_wrong_type_for_height(client):
    response = client.post("/api/bmi/metric", json={"height_cm": True, "weight_kg": "70"})

    assert response.status_code == 422
    assert response.json() == {
        "detail": "Height must be a positive number.",
        "error_code": "INVALID_HEIGHT",
    }


def test_metric_endpoint_wrong_type_for_weight(client):
    response = client.post("/api/bmi/metric", json={"height_cm": "170", "weight_kg": [70]})

    assert response.status_code == 422
    assert response.json()["error_code"] == "INVALID_WEIGHT"


def test_imperial_endpoint_wrong_type_for_inches(client):
    response = client.post(
        "/api/bmi/imperial",
        json={"height_feet": "5", "height_inches": {"in": 7}, "weight_kg": "70"},
    )

    assert response.status_code == 422
    assert response.json()["error_code"] == "INVALID_HEIGHT"


def test_body_that_is_not_an_object(client):
    response = client.post("/api/bmi/metric", json=["170", "70"])

    assert response.status_code == 422
    assert response.json() == {
        "detail": "Please enter both height and weight.",
        "error_code": "MISSING_INPUT",
    }


def test_body_that_is_not_json(client):
    response = client.post(
        "/api/bmi/imperial",
        content=b"height=5",
        headers={"Content-Type": "application/json"},
    )

    assert response.status_code == 422
    assert response.json() == {
        "detail": "Please enter all required fields.",
        "error_code": "MISSING_INPUT",
    }


def test_metric_endpoint_extreme_height(client):
    response = client.post("/api/bmi/metric", json={"height_cm": "1e-155", "weight_kg": "70"})

    assert response.status_code == 422
    assert response.json()["error_code"] == "INVALID_HEIGHT"
