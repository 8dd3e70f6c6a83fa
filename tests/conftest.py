import pytest

from cookieless.config import get_settings

SETTING_NAMES = [
    "TRACKING_ID",
    "VALIDITY_PERIOD_DAYS",
    "ENABLE_FOR_ADMINS",
    "HASH_SEED",
    "ADMIN_PATH_PREFIXES",
    "TRUST_FORWARDED_FOR",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    for name in SETTING_NAMES:
        monkeypatch.delenv(f"COOKIELESS_{name}", raising=False)
    # Keep a developer's .env out of the tests
    monkeypatch.chdir(tmp_path)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
