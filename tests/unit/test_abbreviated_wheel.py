from __future__ import annotations

from itertools import combinations

import pytest

from lottowheel.config import WheelLimits
from lottowheel.engine.combinatorics import binomial
from lottowheel.engine.coverage import calculate_coverage
from lottowheel.engine.wheels import GreedyCoveringOptimizer, GuaranteeSpec
from lottowheel.engine.wheels.abbreviated import initial_gain
from lottowheel.errors import ResourceLimitError, WheelValidationError


def _naive_greedy(pool, game_size, guarantee):
    """Rescan every unused candidate each round; first strict maximum wins."""
    uncovered = [set(subset) for subset in combinations(pool, guarantee.must_match)]
    candidates = list(combinations(pool, game_size))
    used = set()
    selected = []
    while uncovered:
        best_index, best_covered = None, []
        for index, candidate in enumerate(candidates):
            if index in used:
                continue
            covered = [
                subset
                for subset in uncovered
                if len(subset.intersection(candidate)) >= guarantee.guaranteed
            ]
            if len(covered) > len(best_covered):
                best_index, best_covered = index, covered
        if best_index is None:
            break
        used.add(best_index)
        selected.append(tuple(sorted(candidates[best_index])))
        uncovered = [subset for subset in uncovered if subset not in best_covered]
    return selected


def test_one_if_two_on_four_numbers_needs_two_tickets():
    result = GreedyCoveringOptimizer().generate(
        [1, 2, 3, 4], 2, GuaranteeSpec(must_match=2, guaranteed=1)
    )

    assert result.tickets == ((1, 2), (1, 3))
    assert result.ticket_count == 2
    assert result.full_wheel_count == 6
    assert result.savings_percent == 67
    assert result.coverage_or_balance_score == 100
    assert result.wheel_type == "abbreviated"
    assert result.guarantee_description.startswith("Guarantees 1 hits if 2")


def test_initial_gain_matches_direct_count():
    guarantee = GuaranteeSpec(must_match=2, guaranteed=1)
    assert initial_gain(4, 2, guarantee) == 5

    guarantee = GuaranteeSpec(must_match=4, guaranteed=3)
    ticket = {1, 2, 3, 4, 5}
    direct = sum(
        1 for subset in combinations(range(1, 10), 4) if len(ticket.intersection(subset)) >= 3
    )
    assert initial_gain(9, 5, guarantee) == direct


@pytest.mark.parametrize(
    ("pool", "game_size", "must_match", "guaranteed"),
    [
        (list(range(1, 9)), 4, 3, 2),
        (list(range(1, 10)), 5, 4, 3),
        ([2, 5, 7, 11, 13, 17, 19], 3, 3, 2),
    ],
)
def test_selection_matches_exhaustive_rescan(pool, game_size, must_match, guaranteed):
    guarantee = GuaranteeSpec(must_match=must_match, guaranteed=guaranteed)

    selected = GreedyCoveringOptimizer().select_tickets(pool, game_size, guarantee)

    assert selected == _naive_greedy(pool, game_size, guarantee)


def test_abbreviated_wheel_reaches_full_coverage_with_savings():
    pool = list(range(1, 10))
    guarantee = GuaranteeSpec(must_match=4, guaranteed=3)

    result = GreedyCoveringOptimizer().generate(pool, 5, guarantee)

    assert result.coverage_or_balance_score == 100
    assert result.ticket_count < binomial(9, 5)
    assert 0 <= result.savings_percent < 100
    assert len(set(result.tickets)) == result.ticket_count
    assert calculate_coverage(result.tickets, pool, 4, 3).percent == 100


def test_ticket_budget_stops_early_without_error():
    pool = list(range(1, 10))
    guarantee = GuaranteeSpec(must_match=4, guaranteed=3)

    result = GreedyCoveringOptimizer().generate(pool, 5, guarantee, max_tickets=1)

    assert result.ticket_count == 1
    assert result.coverage_or_balance_score < 100


def test_budget_from_limits():
    optimizer = GreedyCoveringOptimizer(WheelLimits(max_tickets=2))

    result = optimizer.generate(list(range(1, 10)), 5, GuaranteeSpec(must_match=4, guaranteed=3))

    assert result.ticket_count == 2


def test_guaranteed_larger_than_ticket_is_rejected():
    with pytest.raises(WheelValidationError, match="ticket size"):
        GreedyCoveringOptimizer().generate(
            [1, 2, 3, 4, 5, 6], 2, GuaranteeSpec(must_match=4, guaranteed=3)
        )


def test_must_match_larger_than_pool_is_rejected():
    with pytest.raises(WheelValidationError, match="smaller"):
        GreedyCoveringOptimizer().generate(
            [1, 2, 3, 4, 5, 6], 3, GuaranteeSpec(must_match=7, guaranteed=3)
        )


def test_guaranteed_larger_than_must_match_is_rejected():
    with pytest.raises(WheelValidationError, match="cannot exceed"):
        GreedyCoveringOptimizer().generate(
            [1, 2, 3, 4, 5, 6], 4, GuaranteeSpec(must_match=2, guaranteed=3)
        )


def test_pool_smaller_than_ticket_is_rejected():
    with pytest.raises(WheelValidationError, match="at least 5"):
        GreedyCoveringOptimizer().generate([1, 2, 3], 5, GuaranteeSpec(must_match=3, guaranteed=2))


def test_too_many_t_subsets_is_resource_error():
    with pytest.raises(ResourceLimitError) as exc_info:
        GreedyCoveringOptimizer().generate(
            list(range(1, 31)), 6, GuaranteeSpec(must_match=5, guaranteed=4)
        )

    assert exc_info.value.estimated == 142_506
    assert exc_info.value.subject == "subsets to check"


def test_too_many_candidates_is_resource_error():
    with pytest.raises(ResourceLimitError) as exc_info:
        GreedyCoveringOptimizer().generate(
            list(range(1, 21)), 10, GuaranteeSpec(must_match=3, guaranteed=3)
        )

    assert exc_info.value.estimated == 184_756
    assert exc_info.value.subject == "candidate tickets"


def test_tiny_wheel_from_large_full_wheel_saves_less_than_everything():
    result = GreedyCoveringOptimizer().generate(
        list(range(1, 19)), 9, GuaranteeSpec(must_match=2, guaranteed=1)
    )

    assert result.full_wheel_count == 48_620
    assert result.ticket_count == 2
    assert result.coverage_or_balance_score == 100
    assert result.savings_percent == 99
