"""Tests for API endpoints."""

from __future__ import annotations

import base64

from fastapi.testclient import TestClient

from shapesight.main import app
from tests.conftest import SVG_SQUARE, blank_image, disk_image, square_image, to_png


client = TestClient(app)


def _b64(data: bytes) -> str:
    return base64.b64encode(data).decode("ascii")


def test_health():
    response = client.get("/api/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ok"
    assert data["shape_types"] == ["circle", "triangle", "rectangle", "pentagon", "star"]


def test_detect_square():
    response = client.post("/api/detect", json={"image_base64": _b64(to_png(square_image()))})
    assert response.status_code == 200
    data = response.json()
    assert data["shape_count"] == 1
    assert data["image_width"] == 100
    assert data["image_height"] == 100
    shape = data["shapes"][0]
    assert shape["type"] == "rectangle"
    assert shape["bounding_box"]["width"] == 30
    assert "Shapes Found: 1" in data["summary"]


def test_detect_data_url():
    payload = "data:image/png;base64," + _b64(to_png(disk_image()))
    response = client.post("/api/detect", json={"image_base64": payload})
    assert response.status_code == 200
    assert response.json()["shapes"][0]["type"] == "circle"


def test_detect_blank():
    response = client.post("/api/detect", json={"image_base64": _b64(to_png(blank_image(32, 32)))})
    assert response.status_code == 200
    assert response.json()["shapes"] == []


def test_detect_nearest_strategy():
    response = client.post(
        "/api/detect",
        json={"image_base64": _b64(to_png(square_image())), "boundary_strategy": "nearest"},
    )
    assert response.status_code == 200
    assert response.json()["shapes"][0]["type"] == "rectangle"


def test_detect_unknown_strategy():
    response = client.post(
        "/api/detect",
        json={"image_base64": _b64(to_png(square_image())), "boundary_strategy": "spiral"},
    )
    assert response.status_code == 422
    assert "spiral" in response.json()["detail"]


def test_detect_requires_exactly_one_source():
    assert client.post("/api/detect", json={}).status_code == 422
    both = {"image_base64": _b64(to_png(square_image())), "svg": SVG_SQUARE}
    assert client.post("/api/detect", json=both).status_code == 422


def test_detect_invalid_base64():
    response = client.post("/api/detect", json={"image_base64": "###"})
    assert response.status_code == 422


def test_detect_undecodable_image():
    response = client.post("/api/detect", json={"image_base64": _b64(b"not an image")})
    assert response.status_code == 422
    assert "decode" in response.json()["detail"]


def test_detect_upload():
    files = {"file": ("square.png", to_png(square_image()), "image/png")}
    response = client.post("/api/detect/upload", files=files)
    assert response.status_code == 200
    assert response.json()["shapes"][0]["type"] == "rectangle"


def test_detect_svg():
    response = client.post("/api/detect", json={"svg": SVG_SQUARE, "size": 100})
    assert response.status_code == 200
    data = response.json()
    assert data["image_width"] == 100
    assert data["shapes"][0]["type"] == "rectangle"
