"""JSON:API error handling middleware."""

import logging
from typing import Any

from starlette.responses import Response

from modlr_jsonapi.core.errors import SerializerError
from modlr_jsonapi.serializers.base import JSONAPISerializer

logger = logging.getLogger(__name__)

JSONAPI_MEDIA_TYPE = "application/vnd.api+json"


class ErrorHandlerMiddleware:
    """Convert exceptions into JSON:API error documents."""

    def __init__(self, app: Any, serializer: JSONAPISerializer | None = None) -> None:
        """Store the ASGI app and the serializer used for error documents."""
        self.app = app
        self.serializer = serializer or JSONAPISerializer()

    async def __call__(self, scope: dict[str, Any], receive: Any, send: Any) -> None:
        """Run the downstream app, answering failures with an error document."""
        if scope.get("type") != "http":
            await self.app(scope, receive, send)
            return
        try:
            await self.app(scope, receive, send)
        except SerializerError as exc:
            response = self._error_response(exc.title, exc.detail, exc.status_code)
            await response(scope, receive, send)
        except Exception:  # noqa: BLE001 - last-resort handler
            logger.exception("Unhandled error while serving %s", scope.get("path"))
            response = self._error_response(
                "Internal Server Error", "An unexpected error occurred.", 500
            )
            await response(scope, receive, send)

    def _error_response(self, title: str, detail: str, status_code: int) -> Response:
        return Response(
            content=self.serializer.serialize_error(title, detail, status_code),
            status_code=status_code,
            media_type=JSONAPI_MEDIA_TYPE,
        )
