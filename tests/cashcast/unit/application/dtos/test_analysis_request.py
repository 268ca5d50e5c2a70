"""Unit tests for the analysis request union."""

from decimal import Decimal

import pytest

from cashcast.application.dtos import (
    ALL_SECTIONS,
    AffordabilityCheck,
    AuditReview,
    BudgetReview,
    ContextSection,
    FinancialContext,
    GeneralAdvice,
    SpendingReview,
    required_sections,
)


class TestRequiredSections:
    def test_general_advice_needs_everything(self):
        assert required_sections(GeneralAdvice()) == ALL_SECTIONS

    def test_affordability_needs_safe_spend_not_budgets(self):
        sections = required_sections(AffordabilityCheck(amount=Decimal("250")))

        assert ContextSection.SAFE_SPEND in sections
        assert ContextSection.BUDGETS not in sections

    def test_audit_needs_anomalies(self):
        sections = required_sections(AuditReview())

        assert ContextSection.ANOMALIES in sections
        assert ContextSection.SUBSCRIPTIONS in sections

    @pytest.mark.parametrize("request_", [SpendingReview(), BudgetReview("Food")])
    def test_review_kinds_include_summary(self, request_):
        assert ContextSection.SUMMARY in required_sections(request_)

    def test_unknown_kind_fails_loudly(self):
        with pytest.raises(TypeError, match="Unknown analysis request"):
            required_sections(object())


class TestFinancialContext:
    def test_defaults_are_empty_and_complete(self):
        context = FinancialContext()

        assert context.summary.balance == 0
        assert context.budgets == []
        assert context.cash_flow == []
        assert context.is_complete

    def test_degraded_context_is_incomplete(self):
        assert not FinancialContext(degraded=["budgets"]).is_complete

    def test_default_lists_are_not_shared(self):
        first, second = FinancialContext(), FinancialContext()
        first.degraded.append("account")

        assert second.degraded == []
