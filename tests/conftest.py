from __future__ import annotations

import os
import re
import tempfile
from collections.abc import Iterator
from pathlib import Path

import pytest

# Applied before any workshop module builds its import-time ``app``.
_SCRATCH_DIR = Path(tempfile.mkdtemp(prefix="workshops-tests-"))
for _prefix in ("WORKSHOP1", "WORKSHOP2", "WORKSHOP3", "WORKSHOP4"):
    os.environ.setdefault(f"{_prefix}_ENVIRONMENT", "test")
os.environ.setdefault("WORKSHOP3_UPLOAD_DIR", str(_SCRATCH_DIR / "avatars"))
os.environ.setdefault("WORKSHOP4_DATABASE_URL", f"sqlite+aiosqlite:///{_SCRATCH_DIR / 'import.db'}")

CSRF_FIELD_PATTERN = re.compile(r'name="csrf_token" value="([^"]+)"')
CSRF_META_PATTERN = re.compile(r'name="csrf-token" content="([^"]+)"')


def extract_csrf_token(html: str) -> str:
    match = CSRF_FIELD_PATTERN.search(html) or CSRF_META_PATTERN.search(html)
    assert match, "Expected a CSRF token in the rendered page"
    return match.group(1)


@pytest.fixture(autouse=True)
def _clear_settings_caches() -> Iterator[None]:
    from workshops.workshop1.app.config import get_settings as workshop1_settings
    from workshops.workshop2.app.config import get_settings as workshop2_settings
    from workshops.workshop3.app.config import get_settings as workshop3_settings
    from workshops.workshop4.app.config import get_settings as workshop4_settings

    caches = (workshop1_settings, workshop2_settings, workshop3_settings, workshop4_settings)
    for cached in caches:
        cached.cache_clear()
    try:
        yield
    finally:
        for cached in caches:
            cached.cache_clear()


@pytest.fixture()
def csrf_token_in():
    """Return a helper that pulls the CSRF token out of a rendered page."""

    return extract_csrf_token
