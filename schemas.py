"""Shape checks for model output.

Only the top-level structure each page relies on is described here; unknown
keys pass through untouched. Checks run when ``VALIDATE_AI_OUTPUT`` is on.
"""
from typing import List, Optional, Type

from pydantic import BaseModel, ConfigDict, ValidationError

from extraction import ParseError


class _Loose(BaseModel):
    model_config = ConfigDict(extra="allow")


class RoadmapMilestone(_Loose):
    month: int
    title: str
    goals: List[str] = []
    actions: List[str] = []


class Roadmap(_Loose):
    title: str
    milestones: List[RoadmapMilestone]


class SwotItem(_Loose):
    title: str
    description: str = ""


class SwotAnalysis(_Loose):
    strengths: List[SwotItem]
    weaknesses: List[SwotItem]
    opportunities: List[SwotItem]
    threats: List[SwotItem]
    overallScore: Optional[float] = None


class RequiredSkill(_Loose):
    skill: str
    priority: str = ""


class Readiness(_Loose):
    percentage: float
    assessment: str = ""


class SkillsAnalysis(_Loose):
    summary: str
    requiredSkills: List[RequiredSkill]
    overallReadiness: Optional[Readiness] = None


class InterviewQuestion(_Loose):
    question: str
    category: str = ""
    tip: str = ""


class InterviewQuestions(_Loose):
    questions: List[InterviewQuestion]


class AnswerEvaluation(_Loose):
    score: float
    strengths: List[str] = []
    improvements: List[str] = []
    improvedAnswer: str = ""


SCHEMAS = {
    "generate-roadmap": Roadmap,
    "analyze-swot": SwotAnalysis,
    "analyze-skills": SkillsAnalysis,
}

INTERVIEW_SCHEMAS = {
    "generate_questions": InterviewQuestions,
    "evaluate_answer": AnswerEvaluation,
}


def schema_for(endpoint_name: str, payload: dict) -> Optional[Type[BaseModel]]:
    if endpoint_name == "interview-coach":
        return INTERVIEW_SCHEMAS.get(payload.get("action"))
    return SCHEMAS.get(endpoint_name)


def check(schema: Type[BaseModel], data: dict, raw: str = None) -> dict:
    """Validate ``data`` against ``schema``; the original mapping is returned."""
    try:
        schema.model_validate(data)
    except ValidationError as e:
        raise ParseError(
            f"AI response does not match {schema.__name__}: {e.error_count()} error(s)",
            raw=raw,
        ) from e
    return data
