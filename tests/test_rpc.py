"""Tests for the JSON-RPC dispatcher."""

import io
import json

import pytest

from enroll_advisor import rpc
from enroll_advisor.rpc import (
    INTERNAL_ERROR,
    INVALID_PARAMS,
    INVALID_REQUEST,
    METHOD_NOT_FOUND,
    PARSE_ERROR,
    handle_line,
    handle_request,
    serve,
)
from tests.factories import school_record, state_record


def _request(method: str, params: dict | None = None, request_id: int = 1) -> dict:
    request = {"jsonrpc": "2.0", "method": method, "id": request_id}
    if params is not None:
        request["params"] = params
    return request


class TestHandleRequest:
    """Method dispatch and error mapping."""

    def test_ping(self) -> None:
        response = handle_request(_request("ping"))

        assert response == {"jsonrpc": "2.0", "result": {"status": "ok"}, "id": 1}

    def test_get_recommendation(self) -> None:
        params = {
            "today": 15,
            "schools": [school_record()],
            "states": [state_record(1)],
        }

        response = handle_request(_request("getRecommendation", params, request_id=7))

        assert response["id"] == 7
        assert "error" not in response
        assert response["result"]["action"] == {"type": "payEnrollmentFee", "schoolId": 1}
        assert response["result"]["urgency"] == 0

    def test_get_weekly_recommendations(self) -> None:
        params = {"startDay": 12, "days": 3, "schools": [school_record()], "states": [state_record(1)]}

        result = handle_request(_request("getWeeklyRecommendations", params))["result"]

        assert result["startDay"] == 12
        assert [d["day"] for d in result["recommendations"]] == [12, 13, 14]
        assert result["upcomingAnnouncements"] == []
        assert result["note"] is None

    def test_states_optional(self) -> None:
        params = {"today": 5, "schools": [school_record()]}

        result = handle_request(_request("getRecommendation", params))["result"]

        assert result["action"] == {"type": "doNothing"}

    def test_validation_error(self) -> None:
        params = {"today": 15, "schools": [school_record(name="Keio", tuition=100)]}

        response = handle_request(_request("getRecommendation", params))

        assert response["error"]["code"] == INVALID_PARAMS
        assert response["error"]["data"] == {
            "school": "Keio",
            "constraint": "tuition must be greater than enrollment fee",
        }

    def test_validation_error_logged_with_context(self, caplog: pytest.LogCaptureFixture) -> None:
        params = {"today": 15, "schools": [school_record(name="Keio", enrollmentFee=0)]}

        with caplog.at_level("WARNING", logger="enroll_advisor"):
            handle_request(_request("getRecommendation", params))

        record = caplog.records[-1]
        assert record.levelname == "WARNING"
        assert record.extra == {"school": "Keio", "constraint": "enrollment fee must be positive"}

    def test_referential_error(self) -> None:
        params = {"today": 15, "schools": [school_record()], "states": [state_record(9)]}

        response = handle_request(_request("getRecommendation", params))

        assert response["error"]["code"] == INVALID_PARAMS
        assert "unknown school 9" in response["error"]["message"]

    def test_missing_param(self) -> None:
        response = handle_request(_request("getRecommendation", {"schools": []}))

        assert response["error"]["code"] == INVALID_PARAMS
        assert "today" in response["error"]["message"]

    def test_bad_days(self) -> None:
        params = {"startDay": 1, "days": "7", "schools": []}

        response = handle_request(_request("getWeeklyRecommendations", params))

        assert response["error"]["code"] == INVALID_PARAMS

    def test_days_above_cap(self) -> None:
        params = {"startDay": 1, "days": 100000000, "schools": []}

        response = handle_request(_request("getWeeklyRecommendations", params))

        assert response["error"]["code"] == INVALID_PARAMS
        assert response["error"]["data"] == {
            "school": None,
            "constraint": "window length must not exceed 366 days",
        }

    def test_unknown_method(self) -> None:
        response = handle_request(_request("payEverything"))

        assert response["error"]["code"] == METHOD_NOT_FOUND
        assert response["id"] == 1

    @pytest.mark.parametrize(
        "request_obj",
        [
            [],
            {"method": "ping", "id": 1},
            {"jsonrpc": "1.0", "method": "ping", "id": 1},
            {"jsonrpc": "2.0", "method": 5, "id": 1},
        ],
    )
    def test_invalid_request(self, request_obj: object) -> None:
        assert handle_request(request_obj)["error"]["code"] == INVALID_REQUEST

    def test_params_must_be_object(self) -> None:
        request = {"jsonrpc": "2.0", "method": "ping", "params": [1], "id": 1}

        assert handle_request(request)["error"]["code"] == INVALID_PARAMS

    def test_internal_error(self, monkeypatch: pytest.MonkeyPatch) -> None:
        def _boom(params: dict, config: object) -> None:
            raise RuntimeError("boom")

        monkeypatch.setitem(rpc.METHODS, "ping", _boom)

        response = handle_request(_request("ping"))

        assert response["error"]["code"] == INTERNAL_ERROR
        assert "boom" in response["error"]["message"]


class TestTransport:
    def test_parse_error(self) -> None:
        response = json.loads(handle_line("{not json"))

        assert response["error"]["code"] == PARSE_ERROR
        assert response["id"] is None

    def test_serve(self) -> None:
        requests = "\n".join(
            [
                json.dumps(_request("ping", request_id=1)),
                "",
                json.dumps(_request("nope", request_id=2)),
            ]
        )
        stdout = io.StringIO()

        count = serve(io.StringIO(requests + "\n"), stdout)

        lines = [json.loads(line) for line in stdout.getvalue().splitlines()]
        assert count == 2
        assert lines[0] == {"jsonrpc": "2.0", "result": {"status": "ready"}, "id": 0}
        assert lines[1]["result"] == {"status": "ok"}
        assert lines[2]["error"]["code"] == METHOD_NOT_FOUND

    def test_undecodable_bytes(self) -> None:
        response = json.loads(handle_line(b"\xff\xfe\n"))

        assert response["error"]["code"] == PARSE_ERROR
        assert response["id"] is None

    def test_serve_continues_after_undecodable_line(self) -> None:
        ping_1 = json.dumps(_request("ping", request_id=1)).encode("utf-8")
        ping_2 = json.dumps(_request("ping", request_id=2)).encode("utf-8")
        stdin = io.TextIOWrapper(io.BytesIO(ping_1 + b"\n\xff\xfe\n" + ping_2 + b"\n"), encoding="utf-8")
        stdout = io.StringIO()

        count = serve(stdin, stdout)

        lines = [json.loads(line) for line in stdout.getvalue().splitlines()]
        assert count == 3
        assert len(lines) == 4
        assert lines[1] == {"jsonrpc": "2.0", "result": {"status": "ok"}, "id": 1}
        assert lines[2]["error"]["code"] == PARSE_ERROR
        assert lines[3] == {"jsonrpc": "2.0", "result": {"status": "ok"}, "id": 2}
