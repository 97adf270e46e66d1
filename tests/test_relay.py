"""
Unit tests for relay.py

Covers the per-request contract shared by every endpoint:
- CORS preflight short-circuit
- request body decoding
- upstream status mapping (429 / 402 / other)
- each endpoint's parse-failure policy
- result envelopes
"""

import json

import httpx
import pytest

from extraction import ParseError
from gateway import ConfigurationError, GatewayClient, UpstreamError
from relay import DEGRADE, ENDPOINTS, RAISE, RAW_ERROR, handle
from settings import Settings

ALL_ENDPOINTS = sorted(ENDPOINTS)

NO_JSON = "죄송합니다. 지금은 분석을 제공할 수 없습니다."


def _payload(name):
    if name == "interview-coach":
        return {"action": "generate_questions", "targetJob": "Data Analyst"}
    return {"currentJob": "Accountant", "targetJob": "Data Analyst", "industry": "Finance"}


def _post(name, gateway, payload=None, validate=False):
    body = json.dumps(payload if payload is not None else _payload(name)).encode("utf-8")
    return handle(ENDPOINTS[name], "POST", body, gateway, validate=validate)


def test_sixteen_endpoints_registered():
    assert len(ENDPOINTS) == 16
    assert {"generate-roadmap", "analyze-swot", "interview-coach", "salary-benchmark"} <= set(ENDPOINTS)


class TestPreflight:

    @pytest.mark.parametrize("name", ALL_ENDPOINTS)
    def test_options_returns_empty_200(self, name, fake_gateway):
        gateway = fake_gateway(content='{"a": 1}')
        reply = handle(ENDPOINTS[name], "OPTIONS", b"", gateway)
        assert reply.status == 200
        assert reply.body is None
        assert gateway.calls == []


class TestRequestBody:

    @pytest.mark.parametrize("name", ALL_ENDPOINTS)
    def test_malformed_json_is_500(self, name, fake_gateway):
        gateway = fake_gateway(content='{"a": 1}')
        reply = handle(ENDPOINTS[name], "POST", b"{not json", gateway)
        assert reply.status == 500
        assert reply.body["error"]
        assert gateway.calls == []

    def test_empty_body_is_500(self, fake_gateway):
        reply = handle(ENDPOINTS["analyze-swot"], "POST", b"", fake_gateway(content="{}"))
        assert reply.status == 500
        assert reply.body["error"]

    def test_non_object_body_is_500(self, fake_gateway):
        reply = handle(ENDPOINTS["analyze-swot"], "POST", b"[1, 2]", fake_gateway(content="{}"))
        assert reply.status == 500
        assert reply.body == {"error": "Request body must be a JSON object"}

    def test_missing_fields_do_not_abort(self, fake_gateway):
        gateway = fake_gateway(content='{"summary": "ok"}')
        reply = _post("analyze-swot", gateway, payload={})
        assert reply.status == 200
        assert reply.body == {"summary": "ok"}

    def test_str_body_accepted(self, fake_gateway):
        reply = handle(ENDPOINTS["analyze-vision"], "POST", '{"currentJob": "PM"}',
                       fake_gateway(content='{"alignmentScore": 80}'))
        assert reply.status == 200


class TestUpstreamStatus:

    @pytest.mark.parametrize("name", ALL_ENDPOINTS)
    def test_rate_limit(self, name, fake_gateway):
        reply = _post(name, fake_gateway(error=UpstreamError(429, "slow down")))
        assert reply.status == 429
        assert reply.body == {"error": ENDPOINTS[name].rate_limit_message}

    @pytest.mark.parametrize("name", ALL_ENDPOINTS)
    def test_credits_exhausted(self, name, fake_gateway):
        reply = _post(name, fake_gateway(error=UpstreamError(402, "pay up")))
        assert reply.status == 402
        assert reply.body == {"error": ENDPOINTS[name].credits_message}

    @pytest.mark.parametrize("status", [400, 401, 500, 503])
    def test_other_statuses_collapse_to_500(self, status, fake_gateway):
        reply = _post("generate-roadmap", fake_gateway(error=UpstreamError(status, "secret body")))
        assert reply.status == 500
        assert reply.body == {"error": "AI 서비스 오류가 발생했습니다."}
        assert "secret body" not in json.dumps(reply.body, ensure_ascii=False)

    @pytest.mark.parametrize("name, status, message", [
        ("generate-roadmap", 429, "요청이 너무 많습니다. 잠시 후 다시 시도해주세요."),
        ("generate-roadmap", 402, "크레딧이 부족합니다. 크레딧을 충전해주세요."),
        ("analyze-skills", 402, "크레딧이 부족합니다."),
        ("build-portfolio", 429, "요청 한도를 초과했습니다. 잠시 후 다시 시도해주세요."),
        ("optimize-resume", 402, "크레딧이 부족합니다. 워크스페이스에 크레딧을 추가해주세요."),
        ("generate-learning-path", 429, "Rate limit exceeded. Please try again later."),
        ("generate-transition-guide", 402, "Payment required. Please add credits."),
    ])
    def test_exact_localized_messages(self, name, status, message, fake_gateway):
        reply = _post(name, fake_gateway(error=UpstreamError(status)))
        assert reply.status == status
        assert reply.body["error"] == message

    def test_configuration_error_is_500(self, fake_gateway):
        error = ConfigurationError("LOVABLE_API_KEY is not configured")
        reply = _post("analyze-vision", fake_gateway(error=error))
        assert reply.status == 500
        assert reply.body == {"error": "LOVABLE_API_KEY is not configured"}

    def test_unexpected_exception_is_500_with_message(self, fake_gateway):
        reply = _post("mentor-match", fake_gateway(error=RuntimeError("connection reset")))
        assert reply.status == 500
        assert reply.body == {"error": "connection reset"}


class TestParseFailurePolicy:
    """The endpoints disagree on what a non-JSON reply means; each is pinned here."""

    def test_policy_split(self):
        degrading = {n for n, e in ENDPOINTS.items() if e.on_parse_error == DEGRADE}
        raw_errors = {n for n, e in ENDPOINTS.items() if e.on_parse_error == RAW_ERROR}
        assert degrading == {"generate-roadmap", "optimize-resume", "optimize-schedule"}
        assert raw_errors == {"generate-transition-guide"}

    @pytest.mark.parametrize("name", [n for n in ALL_ENDPOINTS if ENDPOINTS[n].on_parse_error == RAISE])
    def test_raising_endpoints_return_500(self, name, fake_gateway):
        reply = _post(name, fake_gateway(content=NO_JSON))
        assert reply.status == 500
        assert reply.body == {"error": ENDPOINTS[name].parse_error_message}

    def test_skills_parse_message(self, fake_gateway):
        reply = _post("analyze-skills", fake_gateway(content=NO_JSON))
        assert reply.body == {"error": "AI 응답을 파싱하는데 실패했습니다."}

    def test_roadmap_degrades(self, fake_gateway):
        reply = _post("generate-roadmap", fake_gateway(content=NO_JSON))
        assert reply.status == 200
        assert reply.body == {
            "roadmap": {
                "title": "Accountant에서 Data Analyst으로의 전환 로드맵",
                "rawContent": NO_JSON,
                "parseError": True,
            },
            "currentJob": "Accountant",
            "targetJob": "Data Analyst",
        }

    def test_resume_degrades(self, fake_gateway):
        reply = _post("optimize-resume", fake_gateway(content=NO_JSON))
        assert reply.status == 200
        analysis = reply.body["analysis"]
        assert analysis["summary"] == NO_JSON
        assert analysis["rawContent"] == NO_JSON
        assert analysis["parseError"] is True
        assert analysis["formatIssues"] == []

    def test_schedule_degrades(self, fake_gateway):
        reply = _post("optimize-schedule", fake_gateway(content=NO_JSON))
        assert reply.status == 200
        assert reply.body == {"rawContent": NO_JSON, "parseError": True}

    @pytest.mark.parametrize("name", ["generate-roadmap", "optimize-resume", "optimize-schedule"])
    def test_blank_reply_degrades(self, name, fake_gateway):
        reply = _post(name, fake_gateway(content=""))
        assert reply.status == 200
        result = reply.body.get(ENDPOINTS[name].envelope, reply.body)
        assert result["rawContent"] == ""
        assert result["parseError"] is True

    def test_blank_reply_from_real_gateway_degrades(self):
        def handler(request):
            return httpx.Response(200, json={
                "id": "chatcmpl-1",
                "object": "chat.completion",
                "created": 0,
                "model": "google/gemini-2.5-flash",
                "choices": [{
                    "index": 0,
                    "finish_reason": "stop",
                    "message": {"role": "assistant", "content": ""},
                }],
            })

        settings = Settings(api_key="test-key", gateway_url="https://gateway.test/v1")
        gateway = GatewayClient(settings, http_client=httpx.Client(transport=httpx.MockTransport(handler)))
        reply = _post("generate-roadmap", gateway)
        assert reply.status == 200
        assert reply.body["roadmap"]["parseError"] is True
        assert reply.body["roadmap"]["rawContent"] == ""

    def test_transition_guide_returns_raw_content_with_500(self, fake_gateway):
        reply = _post("generate-transition-guide", fake_gateway(content=NO_JSON))
        assert reply.status == 500
        assert reply.body == {"error": "Failed to parse AI response", "rawContent": NO_JSON}


class TestEnvelopes:

    @pytest.mark.parametrize("name", [
        "analyze-skills", "generate-learning-path", "optimize-linkedin",
        "optimize-resume", "salary-benchmark",
    ])
    def test_analysis_envelope(self, name, fake_gateway):
        reply = _post(name, fake_gateway(content='```json\n{"score": 1}\n```'))
        assert reply.status == 200
        assert reply.body == {"analysis": {"score": 1}}

    def test_portfolio_envelope(self, fake_gateway):
        reply = _post("build-portfolio", fake_gateway(content='{"hero": {}}'))
        assert reply.body == {"portfolio": {"hero": {}}}

    @pytest.mark.parametrize("name", [
        "analyze-swot", "analyze-vision", "content-strategy", "generate-transition-guide",
        "interview-coach", "mentor-match", "networking-strategy", "optimize-schedule",
        "personal-branding",
    ])
    def test_bare_result(self, name, fake_gateway):
        reply = _post(name, fake_gateway(content='Result: {"x": {"y": 2}}'))
        assert reply.status == 200
        assert reply.body == {"x": {"y": 2}}

    def test_roadmap_end_to_end(self, fake_gateway):
        milestones = [
            {"month": m, "title": f"Month {m}", "goals": [], "actions": [], "skills": [], "resources": []}
            for m in range(1, 7)
        ]
        content = "Here is your roadmap:\n```json\n" + json.dumps(
            {"title": "Accountant to Data Analyst", "milestones": milestones}
        ) + "\n```"
        gateway = fake_gateway(content=content)
        payload = {
            "currentJob": "Accountant",
            "targetJob": "Data Analyst",
            "experienceYears": 3,
            "industry": "Finance",
        }

        reply = _post("generate-roadmap", gateway, payload=payload)

        assert reply.status == 200
        assert reply.body["currentJob"] == "Accountant"
        assert reply.body["targetJob"] == "Data Analyst"
        assert len(reply.body["roadmap"]["milestones"]) == 6
        assert set(reply.body) == {"roadmap", "currentJob", "targetJob"}
        call = gateway.calls[0]
        assert call["temperature"] == 0.7
        assert "현재 직무: Accountant" in call["prompts"].user
        assert "경력 연수: 3년" in call["prompts"].user


class TestGatewayCalls:

    def test_model_override(self, fake_gateway):
        gateway = fake_gateway(content="{}")
        _post("personal-branding", gateway)
        assert gateway.calls[0]["model"] == "google/gemini-3-flash-preview"

    def test_default_model_left_to_gateway(self, fake_gateway):
        gateway = fake_gateway(content="{}")
        _post("analyze-swot", gateway)
        assert gateway.calls[0]["model"] is None
        assert gateway.calls[0]["temperature"] is None

    def test_no_caching(self, fake_gateway):
        gateway = fake_gateway(content='{"overallScore": 70}')
        first = _post("analyze-swot", gateway)
        second = _post("analyze-swot", gateway)
        assert len(gateway.calls) == 2
        assert first.status == second.status == 200

    @pytest.mark.parametrize("action", [None, "", "grade"])
    def test_unknown_interview_action_is_500(self, fake_gateway, action):
        """The action is checked before any prompt is built or sent."""
        gateway = fake_gateway(content="{}")
        reply = _post("interview-coach", gateway, payload={"action": action})
        assert reply.status == 500
        assert reply.body["error"] == f"Unknown interview-coach action: {action}"
        assert gateway.calls == []


class TestValidation:

    def test_off_by_default(self, fake_gateway):
        reply = _post("analyze-swot", fake_gateway(content='{"strengths": "not a list"}'))
        assert reply.status == 200

    def test_invalid_shape_uses_parse_policy(self, fake_gateway):
        reply = _post("analyze-swot", fake_gateway(content='{"strengths": "not a list"}'), validate=True)
        assert reply.status == 500
        assert reply.body == {"error": "Failed to parse JSON from AI response"}

    def test_invalid_roadmap_degrades(self, fake_gateway):
        content = '{"title": "t"}'
        reply = _post("generate-roadmap", fake_gateway(content=content), validate=True)
        assert reply.status == 200
        assert reply.body["roadmap"]["parseError"] is True
        assert reply.body["roadmap"]["rawContent"] == content

    def test_valid_interview_questions_pass(self, fake_gateway):
        content = '{"questions": [{"id": 1, "category": "기술", "question": "SQL 조인을 설명하세요", "tip": "예시"}]}'
        reply = _post("interview-coach", fake_gateway(content=content), validate=True)
        assert reply.status == 200
        assert reply.body["questions"][0]["id"] == 1

    def test_endpoints_without_schema_pass_through(self, fake_gateway):
        reply = _post("mentor-match", fake_gateway(content='{"anything": true}'), validate=True)
        assert reply.status == 200


def test_parse_error_outside_extraction_is_plain_500(fake_gateway):
    # only extraction failures go through the fallback policy
    gateway = fake_gateway(error=ParseError("boom"))
    reply = _post("optimize-schedule", gateway)
    assert reply.status == 500
    assert reply.body == {"error": "boom"}
