#!/usr/bin/env python3
"""
Tests for pre-call and post-call cost calculation.
"""
import pytest

from doc_summarizer.core.errors import InvalidArgumentError
from doc_summarizer.core.models.modelspec import PricingProfile
from doc_summarizer.core.pricing.cost_breakdown import CostMode
from doc_summarizer.core.pricing.realtime_cost_reporter import RealtimeCostReporter
from doc_summarizer.core.pricing.token_pricing_policy import TokenPricingPolicy, actual_cost, estimate_cost

PRICING = PricingProfile(input_price=5.0, output_price=10.0, cached_input_price=2.5)


def test_two_million_tokens_at_five_dollars():
    cost = estimate_cost(2_000_000, PricingProfile(input_price=5.0))

    assert cost.input_cost == 10.0
    assert cost.total_cost == 10.0


def test_estimate_prices_every_rate_and_totals_input_only():
    cost = estimate_cost(1_000_000, PRICING)

    assert cost.input_cost == pytest.approx(5.0)
    assert cost.output_cost == pytest.approx(10.0)
    assert cost.cached_input_cost == pytest.approx(2.5)
    assert cost.total_cost == cost.input_cost
    assert cost.mode is CostMode.INPUT_ONLY


def test_zero_tokens_cost_nothing():
    cost = estimate_cost(0, PRICING)

    assert (cost.input_cost, cost.output_cost, cost.cached_input_cost, cost.total_cost) == (0, 0, 0, 0)


@pytest.mark.parametrize("tokens", [1, 777, 123_456, 5_000_000])
def test_cost_is_linear_in_tokens(tokens):
    single = estimate_cost(tokens, PRICING)
    double = estimate_cost(2 * tokens, PRICING)

    assert double.input_cost == pytest.approx(2 * single.input_cost)
    assert double.output_cost == pytest.approx(2 * single.output_cost)
    assert double.cached_input_cost == pytest.approx(2 * single.cached_input_cost)
    assert double.total_cost == pytest.approx(2 * single.total_cost)


def test_negative_tokens_fail_fast():
    with pytest.raises(InvalidArgumentError):
        estimate_cost(-1, PRICING)
    with pytest.raises(InvalidArgumentError):
        actual_cost(10, -1, PRICING)


def test_actual_cost_adds_input_and_output():
    cost = actual_cost(200_000, 50_000, PRICING)

    assert cost.input_cost == pytest.approx(1.0)
    assert cost.output_cost == pytest.approx(0.5)
    assert cost.cached_input_cost == 0.0
    assert cost.total_cost == pytest.approx(1.5)
    assert cost.mode is CostMode.INPUT_OUTPUT


def test_policy_delegates_to_profile():
    policy = TokenPricingPolicy(PRICING)

    assert policy.estimate_cost(1000) == estimate_cost(1000, PRICING)
    assert policy.actual_cost(1000, 10) == actual_cost(1000, 10, PRICING)


def test_realtime_reporter_formats_costs(model_spec):
    reporter = RealtimeCostReporter(model_spec)

    assert reporter.estimate_cost(2_000_000) == "$10.0000"
    assert reporter.actual_cost(1_000_000, 1_000_000) == "$15.0000"
