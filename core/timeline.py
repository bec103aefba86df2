from __future__ import annotations
import re
from typing import Dict, List, Optional

from core.sectionizer import EDUCATION, WORK, RawProfile

# "2017-2021", "2021 ~ 至今" (to present), or a bare year
YEAR_SPAN = re.compile(r"([0-9]{4}\s*[-~—–]\s*[0-9]{4}|[0-9]{4}\s*[-~—–]\s*至今|[0-9]{4})")
ORG_PUNCT = re.compile(r"[，,。]")
_ws = re.compile(r"\s+")

UNKNOWN_PERIOD = "Unknown period"
TITLE_PREFIX = {EDUCATION: "Education", WORK: "Work"}


def build_timeline_item(text: str, kind: str) -> Dict[str, str]:
    m = YEAR_SPAN.search(text)
    period = _ws.sub(" ", m.group(0)) if m else UNKNOWN_PERIOD
    detail = text.replace(m.group(0), "", 1).strip() if m else text
    return {
        "period": period,
        "title": detail or f"{TITLE_PREFIX.get(kind, 'Work')}经历",
        "type": kind,
    }


def build_timeline(profile: RawProfile) -> List[Dict[str, str]]:
    return [
        *(build_timeline_item(ln, EDUCATION) for ln in profile.education),
        *(build_timeline_item(ln, WORK) for ln in profile.work),
    ]


def extract_org_name(text: str) -> Optional[str]:
    """First word left over once year spans and punctuation are removed."""
    cleaned = ORG_PUNCT.sub(" ", YEAR_SPAN.sub("", text)).strip()
    if not cleaned:
        return None
    return cleaned.split()[0]
