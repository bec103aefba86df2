from __future__ import annotations
import logging
import re
from dataclasses import asdict, dataclass
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

logger = logging.getLogger(__name__)

MIN_SCORE = 30
MAX_SCORE = 100
MAX_SKILLS = 6

# tried in order against the whole token; first match wins
SKILL_SCORE_PATTERNS: Tuple[re.Pattern, ...] = (
    re.compile(r"^(?P<name>[^():]+)[(（](?P<score>[0-9]{1,3})[)）]$"),
    re.compile(r"^(?P<name>[^:：]+)[:：](?P<score>[0-9]{1,3})$"),
    re.compile(r"^(?P<name>.+?)\s+(?P<score>[0-9]{1,3})$"),
)

# Term banks
EXPERT_TERMS = ("精通", "熟练", "expert", "advanced")
INTERMEDIATE_TERMS = ("熟悉", "掌握", "proficient", "intermediate")
BASIC_TERMS = ("了解", "basic", "entry")
LEADERSHIP_TERMS = ("负责人", "主导", "lead", "owner")
YEARS = re.compile(r"([0-9]+)\s*年")

BASE_SCORE = 52
MENTION_BOOST = 10
EXPERT_WEIGHT = 8
INTERMEDIATE_WEIGHT = 5
BASIC_WEIGHT = 2
LEADERSHIP_WEIGHT = 4
YEAR_WEIGHT = 2
YEAR_CAP = 12

# radar fallback when no skills were extracted
DEFAULT_SKILLS = ("Communication(65)", "Collaboration(70)", "Leadership(68)")


@dataclass(frozen=True)
class SkillEntry:
    name: str
    score: Optional[int] = None


@dataclass(frozen=True)
class ScoredSkill:
    name: str
    score: int

    def to_dict(self) -> Dict[str, object]:
        return asdict(self)


def clamp_score(score: int) -> int:
    return max(MIN_SCORE, min(MAX_SCORE, score))


def parse_skill_entry(entry: str) -> SkillEntry:
    for pattern in SKILL_SCORE_PATTERNS:
        m = pattern.fullmatch(entry)
        if m:
            return SkillEntry(name=m.group("name").strip(), score=int(m.group("score")))
    return SkillEntry(name=entry)


def count_matches(text: str, terms: Iterable[str]) -> int:
    """Number of distinct terms present in text (presence, not occurrences)."""
    return sum(1 for term in terms if term in text)


def estimate_skill_score(skill: str, context: str) -> int:
    """
    Heuristic proficiency for a skill with no explicit score:
      base 52
      +10 if the skill is mentioned anywhere in the context (case-insensitive)
      +8/+5/+2 per expert/intermediate/basic term present
      +4 per leadership term present
      +2 per year of experience, capped at +12
    clipped to [30, 100].
    """
    mention = MENTION_BOOST if skill.lower() in context.lower() else 0
    proficiency = (
        count_matches(context, EXPERT_TERMS) * EXPERT_WEIGHT
        + count_matches(context, INTERMEDIATE_TERMS) * INTERMEDIATE_WEIGHT
        + count_matches(context, BASIC_TERMS) * BASIC_WEIGHT
    )
    leadership = count_matches(context, LEADERSHIP_TERMS) * LEADERSHIP_WEIGHT
    m = YEARS.search(context)
    years = min(int(m.group(1)) * YEAR_WEIGHT, YEAR_CAP) if m else 0

    return clamp_score(BASE_SCORE + mention + proficiency + leadership + years)


def _unique_entries(skills: Sequence[str]) -> List[SkillEntry]:
    seen: Dict[str, SkillEntry] = {}
    for raw in skills:
        entry = parse_skill_entry(raw)
        if entry.name not in seen:
            seen[entry.name] = entry
    return list(seen.values())[:MAX_SKILLS]


def build_skill_scores(skills: Sequence[str], context: str) -> List[ScoredSkill]:
    out: List[ScoredSkill] = []
    for entry in _unique_entries(skills):
        if entry.score is not None:
            score = entry.score
        else:
            score = estimate_skill_score(entry.name, context)
            logger.debug("estimated %r -> %d", entry.name, score)
        out.append(ScoredSkill(name=entry.name, score=clamp_score(score)))
    return out


def radar_skill_scores(scored: List[ScoredSkill], context: str) -> List[ScoredSkill]:
    """Skills for the radar chart; falls back to DEFAULT_SKILLS when none were found."""
    return scored if scored else build_skill_scores(DEFAULT_SKILLS, context)
