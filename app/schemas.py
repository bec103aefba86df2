# app/schemas.py
from typing import List, Optional
from pydantic import BaseModel, Field

class ProfileRequest(BaseModel):
    # EITHER pass raw text…
    resume_text: Optional[str] = Field(None, description="Raw resume text")

    # …OR a file path that exists on the API container (local dev only)
    resume_path: Optional[str] = None

class RawProfileModel(BaseModel):
    education: List[str] = Field(default_factory=list)
    work: List[str] = Field(default_factory=list)
    skills: List[str] = Field(default_factory=list)

class ScoredSkillModel(BaseModel):
    name: str
    score: int = Field(..., ge=30, le=100)

class TimelineItem(BaseModel):
    period: str
    title: str
    type: str                     # "education" | "work"

class LogoCard(BaseModel):
    name: str
    type: str                     # "Education" | "Work"
    logo_url: str

class ProfileReport(BaseModel):
    profile: RawProfileModel
    skills: List[ScoredSkillModel]
    radar_skills: List[ScoredSkillModel]   # never empty: default set when no skills found
    timeline: List[TimelineItem]
    summary: List[str]
    logos: List[LogoCard]
    suggestions: List[str]

class SkillScoreRequest(BaseModel):
    skills: List[str]
    context: str = ""

class SkillScoreResponse(BaseModel):
    skills: List[ScoredSkillModel]
