"""Schemas de argumentos das operações Mollom.

Cada operação valida seus argumentos aqui antes de chegar ao dispatcher,
que permanece agnóstico ao formato de cada operação.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from mollom.errors import ArgumentValidationError

FeedbackType = Literal["spam", "profanity", "low-quality", "unwanted"]

StatisticType = Literal[
    "total_days",
    "total_accepted",
    "total_rejected",
    "yesterday_accepted",
    "yesterday_rejected",
    "today_accepted",
    "today_rejected",
]


class _OperationArgs(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    def to_call_arguments(self) -> dict[str, Any]:
        """Converte para o mapping enviado ao dispatcher (sem valores None)."""
        return self.model_dump(exclude_none=True)


class CheckContentArgs(_OperationArgs):
    """Argumentos de checkContent. Pelo menos um campo é obrigatório."""

    post_title: str | None = Field(default=None, description="Título do post.")
    post_body: str | None = Field(default=None, description="Corpo do post.")
    author_name: str | None = Field(default=None, description="Nome do autor.")
    author_url: str | None = Field(default=None, description="Site do autor.")
    author_mail: str | None = Field(default=None, description="Email do autor.")
    author_openid: str | None = Field(default=None, description="OpenID do autor.")
    author_ip: str | None = Field(default=None, description="IP do autor.")
    author_id: str | int | None = Field(
        default=None,
        description="Identificador local do autor.",
    )

    @model_validator(mode="after")
    def _require_any_field(self) -> CheckContentArgs:
        if not self.to_call_arguments():
            raise ValueError("informe pelo menos 1 argumento para check_content")
        return self


class SendFeedbackArgs(_OperationArgs):
    """Argumentos de sendFeedback."""

    feedback: FeedbackType
    session_id: str | None = None


class CaptchaArgs(_OperationArgs):
    """Argumentos de getImageCaptcha/getAudioCaptcha."""

    author_ip: str | None = None
    session_id: str | None = None


class StatisticsArgs(_OperationArgs):
    """Argumentos de getStatistics."""

    type: StatisticType


def build_arguments(
    schema: type[_OperationArgs],
    operation: str,
    **values: Any,
) -> dict[str, Any]:
    """Valida `values` contra `schema` e retorna o mapping da chamada.

    Raises:
        ArgumentValidationError: Se a validação falhar.
    """
    try:
        return schema(**values).to_call_arguments()
    except ValidationError as exc:
        details = "; ".join(
            f"{'.'.join(str(p) for p in err['loc']) or 'args'}: {err['msg']}"
            for err in exc.errors()
        )
        raise ArgumentValidationError(operation, details) from exc
