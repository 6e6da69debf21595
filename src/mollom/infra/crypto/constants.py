"""Constantes de assinatura das chamadas Mollom."""

NONCE_UPPER_BOUND = 2**31  # exclusivo: nonce em [0, 2**31 - 1]
# {millis} é preenchido antes do strftime; %z gera +0000
TIMESTAMP_FORMAT = "%Y-%m-%dT%H:%M:%S.{millis}%z"
