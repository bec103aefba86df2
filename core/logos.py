"""Organization logo lookup.

Only URLs are built here; the image itself is loaded by whoever renders the
logo wall. Known institutions map to their real domain, anything else gets a
``<name>.com`` guess.
"""

from __future__ import annotations
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional

from core.sectionizer import RawProfile
from core.timeline import extract_org_name

DEFAULT_LOGO_BASE_URL = "https://logo.clearbit.com"

LOGO_DOMAIN_MAP: Mapping[str, str] = MappingProxyType({
    "Tsinghua University": "tsinghua.edu.cn",
    "Peking University": "pku.edu.cn",
    "Fudan University": "fudan.edu.cn",
    "Shanghai Jiao Tong University": "sjtu.edu.cn",
    "Zhejiang University": "zju.edu.cn",
    "ByteDance": "bytedance.com",
    "Tencent": "tencent.com",
    "Alibaba": "alibaba.com",
    "Baidu": "baidu.com",
    "Meituan": "meituan.com",
    "Huawei": "huawei.com",
    "微软": "microsoft.com",
    "谷歌": "google.com",
    "Google": "google.com",
    "Microsoft": "microsoft.com",
})


def resolve_logo_url(org_name: Optional[str], base_url: str = DEFAULT_LOGO_BASE_URL) -> Optional[str]:
    if not org_name:
        return None
    base = base_url.rstrip("/")
    domain = LOGO_DOMAIN_MAP.get(org_name)
    if domain:
        return f"{base}/{domain}"
    return f"{base}/{org_name}.com"


def build_logo_wall(profile: RawProfile, base_url: str = DEFAULT_LOGO_BASE_URL) -> List[Dict[str, str]]:
    orgs = [("Education", extract_org_name(ln)) for ln in profile.education]
    orgs += [("Work", extract_org_name(ln)) for ln in profile.work]
    return [
        {"name": name, "type": kind, "logo_url": resolve_logo_url(name, base_url)}
        for kind, name in orgs
        if name
    ]
