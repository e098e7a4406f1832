"""Environment check — reports which Supabase credentials are set, masked."""

from __future__ import annotations

from typing import TYPE_CHECKING
from urllib.parse import urlparse

from popmelt.services.result import ServiceResult

if TYPE_CHECKING:
    from popmelt.config.settings import PopmeltSettings


def mask_url(url: str) -> str:
    """Show only the scheme and project ref of a Supabase URL."""
    parsed = urlparse(url)
    if not parsed.scheme or not parsed.hostname:
        return "Invalid URL format"
    project = parsed.hostname.split(".")[0]
    return f"{parsed.scheme}://{project}.***.supabase.co"


def mask_key(key: str) -> str:
    """Show the first and last three characters of a key."""
    if len(key) < 10:
        return "***"
    return f"{key[:3]}...{key[-3:]}"


def check_environment(settings: PopmeltSettings) -> ServiceResult:
    """Report Supabase credential presence without leaking the values."""
    url = settings.supabase_url
    key = settings.supabase_key
    data = {
        "SUPABASE_URL": mask_url(url) if url else None,
        "SUPABASE_KEY": mask_key(key) if key else None,
        "mode": "supabase" if settings.store_configured else "sample-data",
    }
    warnings = [f"{name} is not set" for name in ("SUPABASE_URL", "SUPABASE_KEY") if not data[name]]
    return ServiceResult(ok=True, op="check_environment", data=data, warnings=warnings)
