import pytest

from attendflow.settings import get_settings_module


@pytest.mark.parametrize(
    "env, expected",
    [
        (None, "attendflow.settings.development"),
        ("development", "attendflow.settings.development"),
        ("testing", "attendflow.settings.testing"),
        ("production", "attendflow.settings.production"),
    ],
)
def test_settings_module_follows_app_env(monkeypatch, env, expected):
    if env is None:
        monkeypatch.delenv("APP_ENV", raising=False)
    else:
        monkeypatch.setenv("APP_ENV", env)

    assert get_settings_module() == expected
