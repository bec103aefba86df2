from __future__ import annotations
from typing import List

from core.sectionizer import RawProfile

MIN_SKILLS = 4
FOCUS_SKILLS = 3

EMPTY_SUMMARY = "Add education, work, and skills to generate highlights."
ADD_WORK = "Add more work detail to highlight project impact."
ADD_SKILLS = "Consider adding more tools or soft skills."
ADD_EDUCATION_DETAIL = "Add achievements or focus areas to strengthen education highlights."
LOOKS_COMPLETE = "Resume looks complete. Emphasize quantified impact and key tech stack."


def build_summary(profile: RawProfile) -> List[str]:
    points: List[str] = []
    if profile.education:
        points.append(f"Education entries: {len(profile.education)}. Highlight: {profile.education[0]}")
    if profile.work:
        points.append(f"Work entries: {len(profile.work)}. Latest: {profile.work[0]}")
    if profile.skills:
        focus = ", ".join(profile.skills[:FOCUS_SKILLS])
        points.append(f"Skills detected: {len(profile.skills)}. Focus: {focus}")
    return points or [EMPTY_SUMMARY]


def build_suggestions(profile: RawProfile) -> List[str]:
    """
    Rule-based nudges. Note the skill rule counts raw tokens (duplicates
    included), not the deduplicated scored list.
    """
    out: List[str] = []
    if not profile.work:
        out.append(ADD_WORK)
    if len(profile.skills) < MIN_SKILLS:
        out.append(ADD_SKILLS)
    if profile.education:
        out.append(ADD_EDUCATION_DETAIL)
    return out or [LOOKS_COMPLETE]
