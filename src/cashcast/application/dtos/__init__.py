"""Application DTOs."""

from cashcast.application.dtos.analysis_request import (
    ALL_SECTIONS,
    AffordabilityCheck,
    AnalysisRequest,
    AuditReview,
    BudgetReview,
    ContextSection,
    GeneralAdvice,
    SpendingReview,
    required_sections,
)
from cashcast.application.dtos.financial_context import FinancialContext

__all__ = [
    "ALL_SECTIONS",
    "AffordabilityCheck",
    "AnalysisRequest",
    "AuditReview",
    "BudgetReview",
    "ContextSection",
    "FinancialContext",
    "GeneralAdvice",
    "SpendingReview",
    "required_sections",
]
