from __future__ import annotations

import pytest
from pydantic import ValidationError

from crpt_api.config.settings import AppConfig
from crpt_api.config.urls import get_create_document_url
from crpt_api.core.domain.enums import PeriodUnit


def test_defaults():
    config = AppConfig()
    assert config.base_url == "https://ismp.crpt.ru"
    assert config.request_limit == 10
    assert config.period_unit is PeriodUnit.SECONDS
    assert config.period_count == 1


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("CRPT_API_REQUEST_LIMIT", "7")
    monkeypatch.setenv("CRPT_API_PERIOD_UNIT", "minutes")
    monkeypatch.setenv("CRPT_API_TIMEOUT_SECONDS", "3.5")

    config = AppConfig()

    assert config.request_limit == 7
    assert config.period_unit is PeriodUnit.MINUTES
    assert config.timeout_seconds == 3.5


@pytest.mark.parametrize("field, value", [("request_limit", 0), ("period_count", 0), ("timeout_seconds", 0)])
def test_rejects_non_positive_values(field, value):
    with pytest.raises(ValidationError):
        AppConfig(**{field: value})


def test_rejects_unknown_fields():
    with pytest.raises(ValidationError):
        AppConfig(requests_per_minute=5)


@pytest.mark.parametrize("base", ["https://ismp.crpt.ru", "https://ismp.crpt.ru/"])
def test_create_document_url(base):
    assert get_create_document_url(base) == "https://ismp.crpt.ru/api/v3/lk/documents/create"
