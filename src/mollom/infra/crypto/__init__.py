"""Assinatura das chamadas à API Mollom.

Funções puras: não guardam estado e não precisam de sincronização.
"""

from .constants import NONCE_UPPER_BOUND, TIMESTAMP_FORMAT
from .signature import compute_signature, generate_nonce, generate_timestamp

__all__ = [
    "NONCE_UPPER_BOUND",
    "TIMESTAMP_FORMAT",
    "compute_signature",
    "generate_nonce",
    "generate_timestamp",
]
