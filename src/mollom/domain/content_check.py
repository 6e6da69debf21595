"""Resultado de checkContent."""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field

Classification = Literal["ham", "spam", "unsure", "unknown"]

_SPAM_CODES: dict[int, Classification] = {
    1: "ham",
    2: "spam",
    3: "unsure",
}


class ContentCheck(BaseModel):
    """Classificação de um conteúdo pelo Mollom."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    spam: int = Field(default=0, description="Código bruto: 1 ham, 2 spam, 3 unsure.")
    quality: float | None = Field(default=None, description="Qualidade entre 0 e 1.")
    session_id: str | None = Field(default=None, description="Sessão Mollom do conteúdo.")

    @classmethod
    def from_result(cls, result: dict[str, Any]) -> ContentCheck:
        return cls.model_validate(result)

    @property
    def classification(self) -> Classification:
        return _SPAM_CODES.get(self.spam, "unknown")

    @property
    def is_ham(self) -> bool:
        return self.classification == "ham"

    @property
    def is_spam(self) -> bool:
        return self.classification == "spam"

    @property
    def is_unsure(self) -> bool:
        return self.classification == "unsure"
