import pytest

from core.score import (
    DEFAULT_SKILLS,
    ScoredSkill,
    SkillEntry,
    build_skill_scores,
    clamp_score,
    count_matches,
    estimate_skill_score,
    parse_skill_entry,
    radar_skill_scores,
)


@pytest.mark.parametrize("token, expected", [
    ("Communication(65)", SkillEntry("Communication", 65)),
    ("Communication（65）", SkillEntry("Communication", 65)),
    ("Java (80)", SkillEntry("Java", 80)),
    ("Python:80", SkillEntry("Python", 80)),
    ("Python：80", SkillEntry("Python", 80)),
    ("React 70", SkillEntry("React", 70)),
    ("Data Analysis 90", SkillEntry("Data Analysis", 90)),
    ("JavaScript", SkillEntry("JavaScript", None)),
    ("C++ 1000", SkillEntry("C++ 1000", None)),
    ("Go(abc)", SkillEntry("Go(abc)", None)),
])
def test_parse_skill_entry(token, expected):
    assert parse_skill_entry(token) == expected


def test_name_may_contain_digits_and_spaces():
    assert parse_skill_entry("Vue 3(75)") == SkillEntry("Vue 3", 75)


def test_colon_followed_by_space_falls_through_to_trailing_number():
    assert parse_skill_entry("Python: 80") == SkillEntry("Python:", 80)


def test_clamp_score():
    assert clamp_score(5) == 30
    assert clamp_score(64) == 64
    assert clamp_score(999) == 100


def test_count_matches_is_presence_not_frequency():
    assert count_matches("expert expert expert", ["expert", "advanced"]) == 1
    assert count_matches("EXPERT", ["expert"]) == 0


def test_estimate_mention_and_expert():
    assert estimate_skill_score("Python", "Python expert") == 52 + 10 + 8


def test_estimate_mention_is_case_insensitive():
    assert estimate_skill_score("go", "Go services") == 62


def test_estimate_without_cues():
    assert estimate_skill_score("Rust", "nothing relevant here") == 52


def test_estimate_years_bonus():
    assert estimate_skill_score("Python", "5年 Python 精通") == 52 + 10 + 8 + 10
    assert estimate_skill_score("Python", "10 年 Python") == 52 + 10 + 12


def test_estimate_only_first_year_count_is_used():
    assert estimate_skill_score("Rust", "1年 then 9年") == 52 + 2


def test_estimate_leadership_and_levels():
    context = "熟悉 basic owner"
    assert estimate_skill_score("Rust", context) == 52 + 5 + 2 + 4


def test_estimate_is_clamped():
    context = (
        "Python 精通 熟练 expert advanced 熟悉 掌握 proficient intermediate "
        "了解 basic entry 负责人 主导 lead owner 8年"
    )
    assert estimate_skill_score("Python", context) == 100


def test_dedup_keeps_first_occurrence():
    assert build_skill_scores(["Python(80)", "Python(40)"], "") == [ScoredSkill("Python", 80)]


def test_dedup_is_case_sensitive():
    names = [s.name for s in build_skill_scores(["python", "Python"], "")]
    assert names == ["python", "Python"]


def test_truncates_to_six_unique():
    tokens = ["A(50)", "B(50)", "A(90)", "C(50)", "D(50)", "E(50)", "F(50)", "G(50)"]
    assert [s.name for s in build_skill_scores(tokens, "")] == ["A", "B", "C", "D", "E", "F"]


def test_explicit_scores_are_clamped():
    scored = build_skill_scores(["Go(5)", "Rust(999)"], "")
    assert [s.score for s in scored] == [30, 100]


def test_missing_scores_are_estimated_from_context():
    scored = build_skill_scores(["React 70", "Python"], "Python expert")
    assert scored == [ScoredSkill("React", 70), ScoredSkill("Python", 70)]


def test_scores_stay_in_bounds():
    tokens = ["A(0)", "B 1", "C", "D:100", "E(999)", "F"]
    for s in build_skill_scores(tokens, "lead owner 50年 expert"):
        assert 30 <= s.score <= 100


def test_empty_tokens_give_empty_scores():
    assert build_skill_scores([], "anything") == []


def test_radar_falls_back_to_defaults():
    radar = radar_skill_scores([], "")
    assert len(DEFAULT_SKILLS) == 3
    assert [(s.name, s.score) for s in radar] == [
        ("Communication", 65), ("Collaboration", 70), ("Leadership", 68),
    ]


def test_radar_uses_real_scores_when_present():
    scored = [ScoredSkill("Go", 55)]
    assert radar_skill_scores(scored, "") is scored


def test_scoring_is_deterministic():
    tokens = ["Python", "Go 60", "Rust"]
    context = "Python 熟悉 3年"
    assert build_skill_scores(tokens, context) == build_skill_scores(tokens, context)
