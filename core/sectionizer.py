# core/sectionizer.py
from __future__ import annotations
import logging
import re
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

logger = logging.getLogger(__name__)

EDUCATION = "education"
WORK = "work"
SKILLS = "skills"

# priority order matters: first section with any keyword hit wins
SECTION_KEYWORDS: Tuple[Tuple[str, Tuple[str, ...]], ...] = (
    (EDUCATION, ("教育", "学历", "education")),
    (WORK, ("工作", "经历", "experience", "work")),
    (SKILLS, ("技能", "skill")),
)

LINE_BREAKS = re.compile(r"\n+")
LABEL_PREFIX = re.compile(r"^[^：:]+[：:]")
SKILL_DELIMITERS = re.compile(r"[、,，/]")


@dataclass
class RawProfile:
    education: List[str] = field(default_factory=list)
    work: List[str] = field(default_factory=list)
    skills: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, List[str]]:
        return {
            EDUCATION: list(self.education),
            WORK: list(self.work),
            SKILLS: list(self.skills),
        }


def _trim(s: str) -> str:
    # also drops a stray byte-order mark
    return s.strip().strip("\ufeff").strip()


def _split_lines(text: str) -> List[str]:
    return [_trim(ln) for ln in LINE_BREAKS.split(text) if _trim(ln)]


def pick_section(line: str) -> Optional[str]:
    """Return the section a header line declares, or None for a plain line."""
    low = line.lower()
    for section, keywords in SECTION_KEYWORDS:
        if any(key in low for key in keywords):
            return section
    return None


def strip_label(line: str) -> str:
    """Drop a leading ``Label:`` prefix (ASCII or full-width colon)."""
    return _trim(LABEL_PREFIX.sub("", line, count=1))


def split_skills(line: str) -> List[str]:
    return [_trim(t) for t in SKILL_DELIMITERS.split(line) if _trim(t)]


def _append(profile: RawProfile, section: str, text: str) -> None:
    if section == SKILLS:
        profile.skills.extend(split_skills(text))
    else:
        getattr(profile, section).append(text)


def sectionize_text(text: str) -> RawProfile:
    """
    Walk the lines once, tracking the most recently declared section.
    Header lines contribute whatever follows their label; lines seen before
    any header are dropped.
    """
    profile = RawProfile()
    current: Optional[str] = None

    for ln in _split_lines(text or ""):
        section = pick_section(ln)
        if section:
            current = section
            cleaned = strip_label(ln)
            if cleaned:
                _append(profile, section, cleaned)
        elif current:
            _append(profile, current, ln)

    logger.debug(
        "sectionized: %d education, %d work, %d skill tokens",
        len(profile.education), len(profile.work), len(profile.skills),
    )
    return profile
