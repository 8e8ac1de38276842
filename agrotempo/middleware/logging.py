"""Structured logging setup and request-scoped timing middleware."""

from __future__ import annotations

import logging
import time
import uuid
from typing import Any

import structlog
from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware

from agrotempo.config import LogFormat, Settings, get_settings

_configured = False


def _renderer(settings: Settings, log_level: int) -> Any:
	if settings.log_format == LogFormat.json:
		logging.basicConfig(level=log_level, format="%(message)s")
		return structlog.processors.JSONRenderer()
	logging.basicConfig(level=log_level)
	return structlog.dev.ConsoleRenderer()


def configure_structured_logging() -> None:
	"""Configure stdlib + structlog once per process."""
	global _configured
	if _configured:
		return

	settings = get_settings()
	log_level = getattr(logging, settings.log_level.upper(), logging.INFO)
	renderer = _renderer(settings, log_level)

	structlog.configure(
		processors=[
			structlog.contextvars.merge_contextvars,
			structlog.processors.add_log_level,
			structlog.processors.TimeStamper(fmt="iso", utc=True),
			structlog.processors.format_exc_info,
			renderer,
		],
		wrapper_class=structlog.make_filtering_bound_logger(log_level),
		logger_factory=structlog.PrintLoggerFactory(),
		cache_logger_on_first_use=True,
	)
	_configured = True


_API_PREFIX = ("api", "v1")
_ENGINES = frozenset({"species", "phenology", "risk", "reproduction"})


def engine_for_path(path: str) -> str | None:
	"""Engine router a request path belongs to, e.g. ``/api/v1/risk/maize`` -> ``risk``."""
	segments = path.strip("/").split("/")
	if len(segments) < 3 or tuple(segments[:2]) != _API_PREFIX:
		return None
	return segments[2] if segments[2] in _ENGINES else None


class RequestLoggingMiddleware(BaseHTTPMiddleware):
	"""Bind request id and engine to the log context; log each request's duration.

	Engine routes also report the ``species_id`` path parameter once routing
	has resolved it.
	"""

	async def dispatch(self, request: Request, call_next):  # type: ignore[override]
		request_id = request.headers.get("x-request-id") or uuid.uuid4().hex
		request.state.request_id = request_id
		engine = engine_for_path(request.url.path)

		structlog.contextvars.clear_contextvars()
		structlog.contextvars.bind_contextvars(request_id=request_id, engine=engine)
		logger = structlog.get_logger("agrotempo.request")
		start = time.perf_counter()

		try:
			response = await call_next(request)
		except Exception as exc:
			logger.exception(
				"engine_request_failed",
				method=request.method,
				path=request.url.path,
				duration_ms=_elapsed_ms(start),
				error=str(exc),
			)
			raise

		response.headers["x-request-id"] = request_id
		fields: dict[str, Any] = {
			"method": request.method,
			"path": request.url.path,
			"status_code": response.status_code,
			"duration_ms": _elapsed_ms(start),
		}
		species_id = request.path_params.get("species_id")
		if species_id is not None:
			fields["species_id"] = species_id
		if response.status_code >= 500:
			logger.error("engine_request", **fields)
		else:
			logger.info("engine_request", **fields)
		return response


def _elapsed_ms(start: float) -> float:
	return round((time.perf_counter() - start) * 1000.0, 2)
