"""Assinatura HMAC-SHA1 das chamadas à API Mollom.

Cada chamada leva time, nonce e hash, onde:
    hash = base64(HMAC-SHA1(secret, "{time}:{nonce}:{secret}"))
"""

from __future__ import annotations

import base64
import hashlib
import hmac
import secrets
from datetime import UTC, datetime

from mollom.infra.crypto.constants import NONCE_UPPER_BOUND, TIMESTAMP_FORMAT


def generate_timestamp(now: datetime | None = None) -> str:
    """Gera timestamp no formato esperado pelo Mollom.

    Args:
        now: Instante a formatar. Usa o relógio atual (UTC) se None.

    Returns:
        String como 2026-10-19T12:00:00.123+0000 (nunca sufixo "Z").
    """
    moment = now or datetime.now(UTC)
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=UTC)
    millis = moment.microsecond // 1000
    return moment.strftime(TIMESTAMP_FORMAT.format(millis=f"{millis:03d}"))


def generate_nonce() -> int:
    """Retorna inteiro aleatório em [0, 2**31 - 1]."""
    return secrets.randbelow(NONCE_UPPER_BOUND)


def compute_signature(timestamp: str, nonce: int | str, secret: str) -> str:
    """Calcula o hash de autenticação de uma chamada.

    Args:
        timestamp: Valor enviado em `time`
        nonce: Valor enviado em `nonce`
        secret: Chave privada do site

    Returns:
        Digest HMAC-SHA1 codificado em base64 (sem quebra de linha)
    """
    message = f"{timestamp}:{nonce}:{secret}".encode("utf-8")
    digest = hmac.new(secret.encode("utf-8"), message, hashlib.sha1).digest()
    return base64.b64encode(digest).decode("ascii")
