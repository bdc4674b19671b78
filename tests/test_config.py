import pytest

from wppanalytics.config import Config, ConfigError, load_access_token, validate


def _analytics_config(**overrides):
    values = dict(
        wba_id="123",
        start_date="2025-06-20",
        end_date="2025-06-24",
        granularity="DAY",
        access_token="token",
    )
    values.update(overrides)
    return Config(**values)


def _template_config(**overrides):
    values = dict(
        wba_id="123",
        start_date="2025-06-20",
        end_date="2025-06-24",
        granularity="daily",
        access_token="token",
        mode="template",
        metric_types=["cost", "sent"],
        template_ids=["42"],
    )
    values.update(overrides)
    return Config(**values)


def test_defaults():
    config = Config()
    assert config.granularity == "DAY"
    assert config.timezone == "America/Sao_Paulo"
    assert config.mode == "analytics"
    assert config.metric_types == [] and config.template_ids == []


@pytest.mark.parametrize("granularity", ["HALF_HOUR", "DAY", "MONTH"])
def test_valid_analytics_config(granularity):
    config = _analytics_config(granularity=granularity)
    assert validate(config) is None


def test_valid_template_config():
    assert validate(_template_config()) is None


@pytest.mark.parametrize(
    "overrides, message",
    [
        ({"wba_id": ""}, "WBA ID is required"),
        ({"start_date": ""}, "start date is required"),
        ({"end_date": ""}, "end date is required"),
        ({"granularity": "WEEK"}, "granularity must be HALF_HOUR, DAY, or MONTH"),
        ({"granularity": "daily"}, "granularity must be HALF_HOUR, DAY, or MONTH"),
        ({"access_token": ""}, "access token is required"),
    ],
)
def test_analytics_errors(overrides, message):
    with pytest.raises(ConfigError) as info:
        validate(_analytics_config(**overrides))
    assert str(info.value) == message


@pytest.mark.parametrize(
    "overrides, message",
    [
        ({"granularity": "DAY"}, "granularity for templates must be daily"),
        ({"template_ids": []}, "template IDs are required for template analytics"),
        ({"metric_types": []}, "metric types are required for template analytics"),
        ({"access_token": ""}, "access token is required"),
    ],
)
def test_template_errors(overrides, message):
    with pytest.raises(ConfigError) as info:
        validate(_template_config(**overrides))
    assert str(info.value) == message


def test_first_problem_is_reported():
    with pytest.raises(ConfigError, match="WBA ID is required"):
        validate(Config())


def test_load_access_token_from_environment(monkeypatch):
    monkeypatch.setenv("FB_ACCESS_TOKEN", "token")
    calls = []

    def prompt():
        calls.append(1)
        return "placeholder"

    assert load_access_token(prompt) == "token"
    assert calls == []


def test_load_access_token_prompts_when_unset(monkeypatch):
    monkeypatch.delenv("FB_ACCESS_TOKEN", raising=False)
    assert load_access_token(lambda: "placeholder") == "placeholder"


def test_load_access_token_prompts_when_empty(monkeypatch):
    monkeypatch.setenv("FB_ACCESS_TOKEN", "")
    assert load_access_token(lambda: "secret") == "secret"


def test_load_access_token_propagates_prompt_error(monkeypatch):
    monkeypatch.delenv("FB_ACCESS_TOKEN", raising=False)

    def prompt():
        raise EOFError("no input")

    with pytest.raises(EOFError):
        load_access_token(prompt)