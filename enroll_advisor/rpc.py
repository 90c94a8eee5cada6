"""JSON-RPC 2.0 dispatcher for the advisor.

Transport-agnostic: ``handle_request`` maps one decoded request object to
one response object. ``serve`` wraps it in a line-delimited loop over text
streams (one request per line, one response per line).
"""

from __future__ import annotations

import json
import logging
from typing import Any, Callable, TextIO

from enroll_advisor.api import get_recommendation, get_weekly_recommendations
from enroll_advisor.config import AdvisorConfig
from enroll_advisor.exceptions import ReferentialIntegrityError, RpcError, ValidationError
from enroll_advisor.sinks.serialization import to_wire

logger = logging.getLogger(__name__)

JSONRPC_VERSION = "2.0"

PARSE_ERROR = -32700
INVALID_REQUEST = -32600
METHOD_NOT_FOUND = -32601
INVALID_PARAMS = -32602
INTERNAL_ERROR = -32603

READY_ID = 0


def success(request_id: Any, result: Any) -> dict:
    return {"jsonrpc": JSONRPC_VERSION, "result": result, "id": request_id}


def error(request_id: Any, code: int, message: str, data: Any = None) -> dict:
    body: dict[str, Any] = {"code": code, "message": message}
    if data is not None:
        body["data"] = data
    return {"jsonrpc": JSONRPC_VERSION, "error": body, "id": request_id}


def _param(params: dict, key: str, required: bool = True) -> Any:
    if key not in params:
        if required:
            raise RpcError(INVALID_PARAMS, f"Missing parameter '{key}'")
        return None
    return params[key]


def _list_param(params: dict, key: str) -> list:
    value = params.get(key, [])
    if value is None:
        return []
    if not isinstance(value, list):
        raise RpcError(INVALID_PARAMS, f"Parameter '{key}' must be an array")
    return value


def _ping(params: dict, config: AdvisorConfig) -> Any:
    return {"status": "ok"}


def _get_recommendation(params: dict, config: AdvisorConfig) -> Any:
    result = get_recommendation(
        today=_param(params, "today"),
        schools=_list_param(params, "schools"),
        states=_list_param(params, "states"),
        config=config,
    )
    return to_wire(result)


def _get_weekly_recommendations(params: dict, config: AdvisorConfig) -> Any:
    days = _param(params, "days", required=False)
    if days is not None and (isinstance(days, bool) or not isinstance(days, int)):
        raise RpcError(INVALID_PARAMS, "Parameter 'days' must be an integer")
    weekly = get_weekly_recommendations(
        start_day=_param(params, "startDay"),
        schools=_list_param(params, "schools"),
        states=_list_param(params, "states"),
        days=days,
        config=config,
    )
    return to_wire(weekly)


METHODS: dict[str, Callable[[dict, AdvisorConfig], Any]] = {
    "ping": _ping,
    "getRecommendation": _get_recommendation,
    "getWeeklyRecommendations": _get_weekly_recommendations,
}


def handle_request(request: Any, config: AdvisorConfig | None = None) -> dict:
    """Dispatch one decoded JSON-RPC request and return its response."""
    config = config or AdvisorConfig()
    if not isinstance(request, dict):
        return error(None, INVALID_REQUEST, "Request must be an object")

    request_id = request.get("id")
    method = request.get("method")
    if request.get("jsonrpc") != JSONRPC_VERSION or not isinstance(method, str):
        return error(request_id, INVALID_REQUEST, "Invalid JSON-RPC 2.0 request")

    handler = METHODS.get(method)
    if handler is None:
        return error(request_id, METHOD_NOT_FOUND, f"Method not found: {method}")

    params = request.get("params") or {}
    if not isinstance(params, dict):
        return error(request_id, INVALID_PARAMS, "Params must be an object")

    try:
        return success(request_id, handler(params, config))
    except ValidationError as exc:
        data = {"school": exc.school_name, "constraint": exc.constraint}
        logger.warning("Rejected %s request: %s", method, exc, extra={"extra": data})
        return error(request_id, INVALID_PARAMS, str(exc), data)
    except ReferentialIntegrityError as exc:
        logger.warning("Rejected %s request: %s", method, exc)
        return error(request_id, INVALID_PARAMS, str(exc))
    except RpcError as exc:
        return error(request_id, exc.code, str(exc))
    except Exception as exc:
        logger.exception("Internal error handling %s", method)
        return error(request_id, INTERNAL_ERROR, f"Internal error: {exc}")


def handle_line(line: str | bytes, config: AdvisorConfig | None = None) -> str:
    """Decode one request line and return the encoded response line.

    Raw bytes are decoded as UTF-8; undecodable input is a parse error.
    """
    if isinstance(line, bytes):
        try:
            line = line.decode("utf-8")
        except UnicodeDecodeError as exc:
            logger.warning("Undecodable request line: %s", exc)
            return json.dumps(error(None, PARSE_ERROR, f"Parse error: {exc.reason}"))
    try:
        request = json.loads(line)
    except json.JSONDecodeError as exc:
        return json.dumps(error(None, PARSE_ERROR, f"Parse error: {exc.msg}"))
    return json.dumps(handle_request(request, config), ensure_ascii=False)


def serve(stdin: TextIO, stdout: TextIO, config: AdvisorConfig | None = None) -> int:
    """Answer line-delimited requests until ``stdin`` is exhausted.

    A ready message with id 0 is written before the first request is read.
    When ``stdin`` wraps a binary buffer, lines are read as bytes and decoded
    one at a time, so a malformed line only fails its own request.
    Returns the number of requests handled.
    """
    stdout.write(json.dumps(success(READY_ID, {"status": "ready"})) + "\n")
    stdout.flush()

    source = getattr(stdin, "buffer", stdin)
    count = 0
    for line in source:
        if not line.strip():
            continue
        stdout.write(handle_line(line, config) + "\n")
        stdout.flush()
        count += 1

    logger.info("Served %d request(s)", count)
    return count
