"""Modelos de domínio do cliente Mollom."""

from mollom.domain.arguments import (
    CaptchaArgs,
    CheckContentArgs,
    FeedbackType,
    SendFeedbackArgs,
    StatisticsArgs,
    StatisticType,
    build_arguments,
)
from mollom.domain.content_check import Classification, ContentCheck
from mollom.domain.credentials import Credentials

__all__ = [
    "CaptchaArgs",
    "CheckContentArgs",
    "Classification",
    "ContentCheck",
    "Credentials",
    "FeedbackType",
    "SendFeedbackArgs",
    "StatisticType",
    "StatisticsArgs",
    "build_arguments",
]
