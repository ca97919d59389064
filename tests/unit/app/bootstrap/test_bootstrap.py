"""Testes do bootstrap (validação de settings e factories)."""

from __future__ import annotations

import pytest

from app.bootstrap import (
    create_forward_order_use_case,
    create_hiper_order_forwarder,
    validate_runtime_settings,
)
from app.infra.hiper import HiperOrderForwarder
from app.use_cases.mercus import ForwardMercusOrderUseCase
from config.settings import BaseSettings, HiperSettings
from tests.fakes.fake_order_forwarder import FakeOrderForwarder


def test_validate_runtime_settings_ok() -> None:
    errors = validate_runtime_settings(
        base_settings=BaseSettings(),
        hiper_settings=HiperSettings(api_key="real"),
    )
    assert errors == []


def test_validate_runtime_settings_warns_in_development() -> None:
    errors = validate_runtime_settings(
        base_settings=BaseSettings(environment="development"),
        hiper_settings=HiperSettings(),
    )
    assert errors == ["hiper: HIPER_API_KEY ainda usa o valor de exemplo"]


@pytest.mark.parametrize("environment", ["staging", "production"])
def test_validate_runtime_settings_fails_fast_in_strict_envs(environment: str) -> None:
    with pytest.raises(RuntimeError, match=f"Configuração inválida para {environment}"):
        validate_runtime_settings(
            base_settings=BaseSettings(environment=environment),
            hiper_settings=HiperSettings(api_key=""),
        )


def test_create_hiper_order_forwarder_uses_given_settings() -> None:
    settings = HiperSettings(api_endpoint="https://hiper.test/pedidos", api_key="tok")

    forwarder = create_hiper_order_forwarder(settings)

    assert isinstance(forwarder, HiperOrderForwarder)
    assert forwarder.endpoint == "https://hiper.test/pedidos"


def test_create_forward_order_use_case_accepts_fake_forwarder() -> None:
    use_case = create_forward_order_use_case(forwarder=FakeOrderForwarder())
    assert isinstance(use_case, ForwardMercusOrderUseCase)
