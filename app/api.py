# app/api.py
"""FastAPI application for the Resume Visualizer."""
import logging
import os

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware

from core.logos import DEFAULT_LOGO_BASE_URL, build_logo_wall
from core.parse_resume import build_context, read_resume_text
from core.score import build_skill_scores, radar_skill_scores
from core.sectionizer import sectionize_text
from core.suggestions import build_suggestions, build_summary
from core.timeline import build_timeline

from .schemas import (
    ProfileRequest, ProfileReport,
    SkillScoreRequest, SkillScoreResponse,
)

def resolve_log_level(value: str) -> str:
    level = (value or "").strip().upper()
    # getLevelName returns an int only for registered level names
    return level if isinstance(logging.getLevelName(level), int) else "INFO"


logging.basicConfig(level=resolve_log_level(os.environ.get("LOG_LEVEL", "INFO")))
logger = logging.getLogger(__name__)

CORS_ALLOW_ORIGINS = [
    o.strip() for o in os.environ.get("CORS_ALLOW_ORIGINS", "*").split(",") if o.strip()
]
LOGO_BASE_URL = os.environ.get("LOGO_BASE_URL", DEFAULT_LOGO_BASE_URL)


app = FastAPI(title="Resume Visualizer API", version="0.1.0")

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ALLOW_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def build_report(text: str) -> dict:
    """One full generate pass: classify, score, then every renderer."""
    profile = sectionize_text(text)
    context = build_context(profile, text)
    skills = build_skill_scores(profile.skills, context)
    return {
        "profile": profile.to_dict(),
        "skills": [s.to_dict() for s in skills],
        "radar_skills": [s.to_dict() for s in radar_skill_scores(skills, context)],
        "timeline": build_timeline(profile),
        "summary": build_summary(profile),
        "logos": build_logo_wall(profile, LOGO_BASE_URL),
        "suggestions": build_suggestions(profile),
    }


@app.get("/")
def root():
    return {"ok": True}

@app.get("/healthz")
def healthz():
    return {"status": "ok"}

@app.post("/profile", response_model=ProfileReport)
def generate_profile(request: ProfileRequest) -> ProfileReport:
    try:
        text = read_resume_text(request.resume_path, text=request.resume_text)
    except (OSError, ValueError) as e:
        logger.warning("rejected /profile request: %s", e)
        raise HTTPException(status_code=400, detail=str(e))

    report = build_report(text)
    logger.info(
        "profile generated: %d timeline items, %d skills",
        len(report["timeline"]), len(report["skills"]),
    )
    return ProfileReport(**report)

@app.post("/skills/score", response_model=SkillScoreResponse)
def score_skills(request: SkillScoreRequest) -> SkillScoreResponse:
    scored = build_skill_scores(request.skills, request.context)
    return SkillScoreResponse(skills=[s.to_dict() for s in scored])
