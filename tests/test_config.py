from slack_puncher.config import Settings
from slack_puncher.services.dispatch.dispatcher import RequestDispatcher


def test_settings_defaults(monkeypatch) -> None:
    for name in (
        "SLACK_API_TOKEN",
        "SLACK_API_BASE_URL",
        "SLACK_USER_AGENT",
        "SLACK_MAX_REDIRECTS",
        "ENVIRONMENT",
    ):
        monkeypatch.delenv(name, raising=False)

    settings = Settings(_env_file=None)

    assert settings.slack_api_token is None
    assert settings.base_url == "https://slack.com/api"
    assert settings.slack_user_agent == "APIPuncher-v1.0.0;"
    assert settings.slack_max_redirects == 3
    assert settings.is_development


def test_settings_read_environment(monkeypatch) -> None:
    monkeypatch.setenv("SLACK_API_TOKEN", "xoxb-from-env")
    monkeypatch.setenv("SLACK_API_BASE_URL", "https://slack.example/api/")
    monkeypatch.setenv("ENVIRONMENT", "production")

    settings = Settings(_env_file=None)

    assert settings.slack_api_token == "xoxb-from-env"
    assert settings.base_url == "https://slack.example/api"
    assert not settings.is_development


def test_dispatcher_from_settings(test_settings) -> None:
    dispatcher = RequestDispatcher.from_settings(test_settings)

    assert dispatcher.base_url == "https://slack.com/api"
    assert dispatcher.user_agent == "APIPuncher-v1.0.0;"
    assert dispatcher.max_redirects == 3
    assert dispatcher.timeout == 5
    assert dispatcher.endpoint_url("usergroups.users", "list") == (
        "https://slack.com/api/usergroups.users.list"
    )


def test_explicit_token_overrides_settings(test_settings) -> None:
    dispatcher = RequestDispatcher.from_settings(test_settings, token="xoxp-other")

    descriptor = dispatcher.registry.get("auth", "test")

    assert dispatcher.build_options(descriptor) == {"token": "xoxp-other"}


def test_configure_logging_quiets_httpx(test_settings) -> None:
    import logging

    from slack_puncher.logging_config import configure_logging

    configure_logging(test_settings)

    assert logging.getLogger("httpx").level == logging.WARNING
