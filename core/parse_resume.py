from __future__ import annotations
from typing import Optional

from core.sectionizer import RawProfile, sectionize_text


def read_resume_text(path: Optional[str] = None, text: Optional[str] = None) -> str:
    if text is None:
        if not path:
            raise ValueError("parse_resume: provide text or path")
        with open(path, "r", encoding="utf-8-sig") as f:
            text = f.read()
    return text


def parse_resume(path: Optional[str] = None, text: Optional[str] = None) -> RawProfile:
    return sectionize_text(read_resume_text(path, text))


def build_context(profile: RawProfile, raw_text: str) -> str:
    """Corpus for score estimation: every extracted line, then the raw input."""
    return " ".join([*profile.education, *profile.work, raw_text])
