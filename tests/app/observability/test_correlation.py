"""Testes do correlation_id por contexto."""

from __future__ import annotations

import uuid

import pytest

from app.observability import (
    correlation_scope,
    generate_correlation_id,
    get_correlation_id,
    reset_correlation_id,
    set_correlation_id,
)


def test_set_and_reset_correlation_id() -> None:
    before = get_correlation_id()
    token = set_correlation_id("cid-1")
    try:
        assert get_correlation_id() == "cid-1"
    finally:
        reset_correlation_id(token)
    assert get_correlation_id() == before


def test_set_without_value_generates_uuid() -> None:
    token = set_correlation_id(None)
    try:
        uuid.UUID(get_correlation_id())
    finally:
        reset_correlation_id(token)


def test_generate_correlation_id_is_unique() -> None:
    assert generate_correlation_id() != generate_correlation_id()


def test_correlation_scope_restores_previous_value() -> None:
    before = get_correlation_id()

    with correlation_scope("cid-2") as correlation_id:
        assert correlation_id == "cid-2"
        assert get_correlation_id() == "cid-2"

    assert get_correlation_id() == before


def test_correlation_scope_generates_id_for_empty_header() -> None:
    with correlation_scope("") as correlation_id:
        uuid.UUID(correlation_id)
        assert get_correlation_id() == correlation_id


def test_correlation_scope_restores_on_exception() -> None:
    before = get_correlation_id()

    with pytest.raises(RuntimeError):
        with correlation_scope("cid-3"):
            raise RuntimeError("falha")

    assert get_correlation_id() == before
