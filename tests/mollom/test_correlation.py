"""Testes do correlation_id."""

from __future__ import annotations

from mollom.observability import (
    correlation_scope,
    get_correlation_id,
    reset_correlation_id,
    set_correlation_id,
)


def test_default_is_empty() -> None:
    assert get_correlation_id() == ""


def test_set_and_reset() -> None:
    token = set_correlation_id("req-42")
    assert get_correlation_id() == "req-42"
    reset_correlation_id(token)
    assert get_correlation_id() == ""


def test_generates_id_when_none() -> None:
    token = set_correlation_id()
    try:
        assert len(get_correlation_id()) == 32
    finally:
        reset_correlation_id(token)


class TestCorrelationScope:
    """Testes de correlation_scope."""

    def test_creates_id_and_restores_empty(self) -> None:
        with correlation_scope() as correlation_id:
            assert correlation_id
            assert get_correlation_id() == correlation_id
        assert get_correlation_id() == ""

    def test_nested_scope_reuses_outer_id(self) -> None:
        with correlation_scope() as outer, correlation_scope() as inner:
            assert inner == outer

    def test_keeps_caller_id(self) -> None:
        token = set_correlation_id("req-9")
        try:
            with correlation_scope() as correlation_id:
                assert correlation_id == "req-9"
            assert get_correlation_id() == "req-9"
        finally:
            reset_correlation_id(token)
