"""API 요청 로깅 미들웨어.

Request logging middleware.
Every request gets one log line (method, path, status, duration). When
Axiom is configured the same event, enriched with masked request data and
the error reason, is shipped to the Axiom dataset.
"""

import json
import logging
import re
import time
from typing import Any

from axiom_py import Client as AxiomClient
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from project_board.config import settings

logger = logging.getLogger(__name__)

# 마스킹 대상 필드 패턴: Fields to mask in request bodies and query params
_SENSITIVE_KEYS = re.compile(
    r"(password|passwd|secret|token|authorization|api_key|apikey|credential)",
    re.IGNORECASE,
)

# 로깅 제외 경로: Paths excluded from logging
_SKIP_PATHS = {"/health", "/docs", "/redoc", "/openapi.json"}

_MAX_ERROR_LEN = 500


def mask_sensitive(data: Any, depth: int = 0) -> Any:
    """민감 필드 재귀 마스킹: Recursively mask sensitive keys in dicts/lists."""
    if depth > 5:
        return "..."
    if isinstance(data, dict):
        return {
            k: "***" if _SENSITIVE_KEYS.search(str(k)) else mask_sensitive(v, depth + 1)
            for k, v in data.items()
        }
    if isinstance(data, list):
        return [mask_sensitive(item, depth + 1) for item in data[:20]]
    return data


def extract_error_detail(body: bytes) -> str:
    """에러 응답 본문에서 사유 추출: Pull ``detail`` out of an error body."""
    try:
        data = json.loads(body)
        detail = data.get("detail", data) if isinstance(data, dict) else data
        text = detail if isinstance(detail, str) else json.dumps(detail)
    except (json.JSONDecodeError, UnicodeDecodeError):
        text = body.decode("utf-8", errors="replace")
    if len(text) > _MAX_ERROR_LEN:
        text = text[:_MAX_ERROR_LEN] + "..."
    return text


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """모든 API 요청을 로깅하고, 설정 시 Axiom으로 전송하는 미들웨어."""

    def __init__(self, app: Any, axiom_client: AxiomClient | None = None) -> None:
        super().__init__(app)
        self._dataset: str = settings.AXIOM_DATASET
        self._client: AxiomClient | None = axiom_client
        if self._client is None and settings.AXIOM_API_TOKEN and settings.AXIOM_DATASET:
            self._client = AxiomClient(token=settings.AXIOM_API_TOKEN)

    async def _read_body(self, request: Request) -> Any:
        if request.method not in ("POST", "PUT", "PATCH"):
            return None
        body_bytes = await request.body()
        if not body_bytes:
            return None
        try:
            return mask_sensitive(json.loads(body_bytes))
        except (json.JSONDecodeError, UnicodeDecodeError):
            return "(non-json body)"

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        if request.url.path in _SKIP_PATHS:
            return await call_next(request)

        start_time = time.perf_counter()
        request_body: Any = await self._read_body(request) if self._client else None
        error_detail: str | None = None
        status_code: int = 500

        try:
            response = await call_next(request)
            status_code = response.status_code

            # 에러 응답은 본문을 소비해 사유를 얻고 다시 감싼다: Re-wrap a consumed error body
            if status_code >= 400 and self._client is not None:
                resp_body = b""
                async for chunk in response.body_iterator:
                    resp_body += chunk if isinstance(chunk, bytes) else chunk.encode("utf-8")
                error_detail = extract_error_detail(resp_body)
                response = Response(
                    content=resp_body,
                    status_code=status_code,
                    headers=dict(response.headers),
                    media_type=response.media_type,
                )
        except Exception as exc:
            error_detail = f"{type(exc).__name__}: {str(exc)[:300]}"
            raise
        finally:
            duration_ms = round((time.perf_counter() - start_time) * 1000, 2)
            logger.info(
                "%s %s -> %d (%.2f ms)",
                request.method, request.url.path, status_code, duration_ms,
            )
            if self._client is not None:
                self._ship(request, status_code, duration_ms, request_body, error_detail)

        return response

    def _ship(
        self,
        request: Request,
        status_code: int,
        duration_ms: float,
        request_body: Any,
        error_detail: str | None,
    ) -> None:
        event: dict[str, Any] = {
            "method": request.method,
            "path": request.url.path,
            "status_code": status_code,
            "duration_ms": duration_ms,
        }
        if request.query_params:
            event["query_params"] = mask_sensitive(dict(request.query_params))
        if request.path_params:
            event["path_params"] = dict(request.path_params)
        if request_body is not None:
            event["request_body"] = request_body
        if error_detail:
            event["error"] = error_detail

        # 전송 실패가 요청 처리에 영향을 주지 않음: shipping never breaks the request
        try:
            self._client.ingest_events(self._dataset, [event])
        except Exception:
            logger.warning("axiom ingest failed for %s %s", request.method, request.url.path, exc_info=True)
