"""Tests for modlr_jsonapi.middleware."""

import json

import pytest
from starlette.applications import Starlette
from starlette.responses import Response
from starlette.routing import Route
from starlette.testclient import TestClient

from modlr_jsonapi.middleware import ErrorHandlerMiddleware


@pytest.fixture
def client(serializer, article, author) -> TestClient:
    async def show_article(request):
        return Response(serializer.serialize(article), media_type="application/vnd.api+json")

    async def broken_article(request):
        article.set("author", [author])
        return Response(serializer.serialize(article))

    async def crash(request):
        raise RuntimeError("database unavailable")

    app = Starlette(
        routes=[
            Route("/articles/1", show_article),
            Route("/articles/broken", broken_article),
            Route("/crash", crash),
        ]
    )
    app.add_middleware(ErrorHandlerMiddleware, serializer=serializer)
    return TestClient(app)


def test_successful_response_passes_through(client):
    response = client.get("/articles/1")
    assert response.status_code == 200
    assert response.json()["data"]["id"] == "1"


def test_serializer_error_becomes_error_document(client):
    response = client.get("/articles/broken")
    assert response.status_code == 400
    assert response.headers["content-type"].startswith("application/vnd.api+json")
    assert json.loads(response.text) == {
        "errors": [
            {
                "status": "400",
                "title": "Bad Request",
                "detail": "Invalid relationship value for 'author'.",
            }
        ]
    }


def test_unexpected_error_becomes_internal_server_error(client):
    response = client.get("/crash")
    assert response.status_code == 500
    assert response.json() == {
        "errors": [
            {"status": "500", "title": "Internal Server Error", "detail": "An unexpected error occurred."}
        ]
    }
    assert "database unavailable" not in response.text
