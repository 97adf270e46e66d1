"""Request handling shared by every coaching endpoint.

Each endpoint is a prompt builder plus a handful of policies: the localized
messages for upstream failures, the key its result is wrapped under and what
happens when the model reply is not parseable JSON.
"""
import json
import logging
from dataclasses import dataclass
from typing import Callable, NamedTuple, Optional, Tuple

import prompts
import schemas
from extraction import ParseError, extract_json
from gateway import UpstreamError

logger = logging.getLogger(__name__)

RATE_LIMIT_KO = "요청이 너무 많습니다. 잠시 후 다시 시도해주세요."
RATE_LIMIT_QUOTA_KO = "요청 한도를 초과했습니다. 잠시 후 다시 시도해주세요."
RATE_LIMIT_EN = "Rate limit exceeded. Please try again later."
CREDITS_KO = "크레딧이 부족합니다."
CREDITS_EN = "Payment required. Please add credits."
UPSTREAM_KO = "AI 서비스 오류가 발생했습니다."
UPSTREAM_EN = "AI gateway error"
PARSE_FAILED = "Failed to parse AI response"

# what to do when the model reply holds no usable JSON
RAISE = "raise"            # 500 {error}
RAW_ERROR = "raw_error"    # 500 {error, rawContent}
DEGRADE = "degrade"        # 200 with the endpoint's fallback result


class Reply(NamedTuple):
    status: int
    body: Optional[dict]


@dataclass(frozen=True)
class Endpoint:
    name: str
    build_prompts: Callable[[dict], prompts.PromptPair]
    rate_limit_message: str = RATE_LIMIT_KO
    credits_message: str = CREDITS_KO
    upstream_error_message: str = UPSTREAM_KO
    parse_error_message: str = PARSE_FAILED
    on_parse_error: str = RAISE
    fallback: Optional[Callable[[dict, str], dict]] = None
    envelope: Optional[str] = None
    echo_fields: Tuple[str, ...] = ()
    model: Optional[str] = None
    temperature: Optional[float] = None
    actions: Tuple[str, ...] = ()


def _roadmap_fallback(payload: dict, content: str) -> dict:
    current_job = payload.get("currentJob") or ""
    target_job = payload.get("targetJob") or ""
    return {
        "title": f"{current_job}에서 {target_job}으로의 전환 로드맵",
        "rawContent": content,
        "parseError": True,
    }


def _resume_fallback(payload: dict, content: str) -> dict:
    return {
        "atsScore": 70,
        "summary": content,
        "keywordAnalysis": {
            "found": [],
            "missing": [],
            "recommendations": "분석 결과를 파싱할 수 없습니다.",
        },
        "formatIssues": [],
        "contentImprovements": [],
        "strengthPoints": [],
        "actionItems": [],
        "rawContent": content,
        "parseError": True,
    }


def _schedule_fallback(payload: dict, content: str) -> dict:
    return {"rawContent": content, "parseError": True}


ENDPOINTS = {e.name: e for e in [
    Endpoint(
        "analyze-skills", prompts.build_skills_analysis,
        parse_error_message="AI 응답을 파싱하는데 실패했습니다.",
        envelope="analysis",
    ),
    Endpoint(
        "analyze-swot", prompts.build_swot,
        parse_error_message="Failed to parse JSON from AI response",
    ),
    Endpoint("analyze-vision", prompts.build_vision),
    Endpoint(
        "build-portfolio", prompts.build_portfolio,
        rate_limit_message=RATE_LIMIT_QUOTA_KO,
        credits_message="크레딧이 부족합니다. 충전 후 다시 시도해주세요.",
        parse_error_message="Failed to parse portfolio content",
        envelope="portfolio",
    ),
    Endpoint(
        "content-strategy", prompts.build_content_strategy,
        credits_message="크레딧이 부족합니다. 충전이 필요합니다.",
        parse_error_message="Could not parse JSON from AI response",
    ),
    Endpoint(
        "generate-learning-path", prompts.build_learning_path,
        rate_limit_message=RATE_LIMIT_EN,
        credits_message=CREDITS_EN,
        upstream_error_message=UPSTREAM_EN,
        parse_error_message="Failed to parse learning path analysis",
        envelope="analysis",
    ),
    Endpoint(
        "generate-roadmap", prompts.build_roadmap,
        credits_message="크레딧이 부족합니다. 크레딧을 충전해주세요.",
        on_parse_error=DEGRADE,
        fallback=_roadmap_fallback,
        envelope="roadmap",
        echo_fields=("currentJob", "targetJob"),
        temperature=0.7,
    ),
    Endpoint(
        "generate-transition-guide", prompts.build_transition_guide,
        rate_limit_message=RATE_LIMIT_EN,
        credits_message=CREDITS_EN,
        upstream_error_message=UPSTREAM_EN,
        on_parse_error=RAW_ERROR,
    ),
    Endpoint(
        "interview-coach", prompts.build_interview_coach,
        actions=tuple(prompts.INTERVIEW_ACTIONS),
    ),
    Endpoint(
        "mentor-match", prompts.build_mentor_match,
        credits_message="크레딧이 부족합니다. 충전이 필요합니다.",
        parse_error_message="Could not parse JSON from AI response",
    ),
    Endpoint(
        "networking-strategy", prompts.build_networking_strategy,
        credits_message="크레딧이 부족합니다. 충전이 필요합니다.",
        parse_error_message="Could not parse JSON from AI response",
    ),
    Endpoint("optimize-linkedin", prompts.build_linkedin, envelope="analysis"),
    Endpoint(
        "optimize-resume", prompts.build_resume,
        credits_message="크레딧이 부족합니다. 워크스페이스에 크레딧을 추가해주세요.",
        on_parse_error=DEGRADE,
        fallback=_resume_fallback,
        envelope="analysis",
    ),
    Endpoint(
        "optimize-schedule", prompts.build_schedule,
        on_parse_error=DEGRADE,
        fallback=_schedule_fallback,
    ),
    Endpoint(
        "personal-branding", prompts.build_personal_branding,
        rate_limit_message=RATE_LIMIT_QUOTA_KO,
        credits_message="크레딧이 부족합니다. 크레딧을 충전해주세요.",
        model="google/gemini-3-flash-preview",
    ),
    Endpoint(
        "salary-benchmark", prompts.build_salary_benchmark,
        envelope="analysis",
        temperature=0.7,
    ),
]}


def _decode(raw_body) -> dict:
    if isinstance(raw_body, (bytes, bytearray)):
        raw_body = raw_body.decode("utf-8")
    payload = json.loads(raw_body)
    if not isinstance(payload, dict):
        raise ValueError("Request body must be a JSON object")
    return payload


def _wrap(endpoint: Endpoint, payload: dict, result: dict) -> dict:
    if endpoint.envelope is None:
        return result
    body = {endpoint.envelope: result}
    for field in endpoint.echo_fields:
        body[field] = payload.get(field)
    return body


def _upstream_reply(endpoint: Endpoint, error: UpstreamError) -> Reply:
    if error.status_code == 429:
        return Reply(429, {"error": endpoint.rate_limit_message})
    if error.status_code == 402:
        return Reply(402, {"error": endpoint.credits_message})
    return Reply(500, {"error": endpoint.upstream_error_message})


def _parse_failure_reply(endpoint: Endpoint, payload: dict, content: str) -> Reply:
    if endpoint.on_parse_error == DEGRADE:
        return Reply(200, _wrap(endpoint, payload, endpoint.fallback(payload, content)))
    if endpoint.on_parse_error == RAW_ERROR:
        return Reply(500, {"error": endpoint.parse_error_message, "rawContent": content})
    return Reply(500, {"error": endpoint.parse_error_message})


def handle(endpoint: Endpoint, method: str, raw_body, gateway, validate: bool = False) -> Reply:
    """Run one request through build -> gateway -> extract and map the outcome.

    ``OPTIONS`` short-circuits with an empty 200. Every other failure ends up
    as a JSON ``{"error": ...}`` body; nothing is retried.
    """
    if method == "OPTIONS":
        return Reply(200, None)

    try:
        payload = _decode(raw_body)
        if endpoint.actions and payload.get("action") not in endpoint.actions:
            raise ValueError(f"Unknown {endpoint.name} action: {payload.get('action')}")
        prompt_pair = endpoint.build_prompts(payload)
        logger.info("Calling AI gateway for %s", endpoint.name)
        try:
            content = gateway.complete(
                prompt_pair, model=endpoint.model, temperature=endpoint.temperature
            )
        except UpstreamError as e:
            return _upstream_reply(endpoint, e)

        try:
            result = extract_json(content)
            if validate:
                schema = schemas.schema_for(endpoint.name, payload)
                if schema is not None:
                    result = schemas.check(schema, result, raw=content)
        except ParseError as e:
            logger.error("Failed to parse %s response: %s", endpoint.name, e)
            return _parse_failure_reply(endpoint, payload, content)

        logger.info("%s completed successfully", endpoint.name)
        return Reply(200, _wrap(endpoint, payload, result))
    except Exception as e:
        logger.exception("Error in %s", endpoint.name)
        return Reply(500, {"error": str(e) or "Unknown error"})
