from core.logos import build_logo_wall, resolve_logo_url
from core.sectionizer import sectionize_text


def test_known_organization_uses_mapped_domain():
    assert resolve_logo_url("Tsinghua University") == "https://logo.clearbit.com/tsinghua.edu.cn"
    assert resolve_logo_url("微软") == "https://logo.clearbit.com/microsoft.com"


def test_unknown_organization_guesses_dot_com():
    assert resolve_logo_url("Acme") == "https://logo.clearbit.com/Acme.com"


def test_empty_name_has_no_url():
    assert resolve_logo_url("") is None
    assert resolve_logo_url(None) is None


def test_custom_base_url():
    assert resolve_logo_url("Baidu", "https://logos.example/") == "https://logos.example/baidu.com"


def test_logo_wall_from_profile():
    profile = sectionize_text(
        "Education: 2017-2021 Tsinghua University\n"
        "Work: 2021-2023 ByteDance Frontend Engineer\n"
        "2020"
    )
    assert build_logo_wall(profile) == [
        {"name": "Tsinghua", "type": "Education", "logo_url": "https://logo.clearbit.com/Tsinghua.com"},
        {"name": "ByteDance", "type": "Work", "logo_url": "https://logo.clearbit.com/bytedance.com"},
    ]


def test_logo_wall_empty_profile():
    assert build_logo_wall(sectionize_text("")) == []
