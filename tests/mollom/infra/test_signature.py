"""Testes da assinatura das chamadas Mollom."""

from __future__ import annotations

import base64
import hashlib
import hmac
import re
from datetime import UTC, datetime, timedelta, timezone

from mollom.infra.crypto import (
    NONCE_UPPER_BOUND,
    compute_signature,
    generate_nonce,
    generate_timestamp,
)

_TIMESTAMP_RE = re.compile(r"^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}\.\d{3}[+-]\d{4}$")


class TestGenerateTimestamp:
    """Testes do formato do campo time."""

    def test_formats_milliseconds_and_offset(self) -> None:
        moment = datetime(2026, 10, 19, 12, 0, 5, 123456, tzinfo=UTC)
        assert generate_timestamp(moment) == "2026-10-19T12:00:05.123+0000"

    def test_never_uses_z_suffix(self) -> None:
        stamp = generate_timestamp()
        assert not stamp.endswith("Z")
        assert _TIMESTAMP_RE.match(stamp)

    def test_naive_datetime_is_treated_as_utc(self) -> None:
        moment = datetime(2026, 1, 2, 3, 4, 5, 6000)
        assert generate_timestamp(moment) == "2026-01-02T03:04:05.006+0000"

    def test_keeps_non_utc_offset(self) -> None:
        tz = timezone(timedelta(hours=-3))
        moment = datetime(2026, 1, 2, 3, 4, 5, tzinfo=tz)
        assert generate_timestamp(moment) == "2026-01-02T03:04:05.000-0300"


class TestGenerateNonce:
    """Testes do nonce."""

    def test_nonce_in_positive_int32_range(self) -> None:
        samples = [generate_nonce() for _ in range(1000)]
        assert all(0 <= nonce <= 2**31 - 1 for nonce in samples)
        assert all(isinstance(nonce, int) for nonce in samples)

    def test_upper_bound_constant(self) -> None:
        assert NONCE_UPPER_BOUND == 2**31

    def test_nonces_vary(self) -> None:
        samples = {generate_nonce() for _ in range(50)}
        assert len(samples) > 1


class TestComputeSignature:
    """Testes do hash HMAC-SHA1."""

    def test_matches_documented_construction(self) -> None:
        timestamp = "2026-10-19T12:00:05.123+0000"
        expected = base64.b64encode(
            hmac.new(
                b"priv",
                f"{timestamp}:42:priv".encode(),
                hashlib.sha1,
            ).digest()
        ).decode()

        assert compute_signature(timestamp, 42, "priv") == expected

    def test_is_deterministic(self) -> None:
        first = compute_signature("2026-10-19T12:00:05.123+0000", 7, "secret")
        second = compute_signature("2026-10-19T12:00:05.123+0000", 7, "secret")
        assert first == second

    def test_nonce_as_string_or_int_is_equivalent(self) -> None:
        assert compute_signature("t", 7, "s") == compute_signature("t", "7", "s")

    def test_changes_with_any_input(self) -> None:
        base = compute_signature("t", 1, "s")
        assert compute_signature("t2", 1, "s") != base
        assert compute_signature("t", 2, "s") != base
        assert compute_signature("t", 1, "s2") != base

    def test_base64_without_newline(self) -> None:
        signature = compute_signature("t", 1, "s")
        assert "\n" not in signature
        assert len(base64.b64decode(signature)) == 20  # SHA-1

    def test_handles_non_ascii_secret(self) -> None:
        signature = compute_signature("t", 1, "chave-ção")
        assert len(base64.b64decode(signature)) == 20
