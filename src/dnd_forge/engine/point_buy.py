"""D&D 5E point-buy ability score rules (PHB p.13).

Every score starts at 8 for free. Raising a score to 9-13 costs one point
per step, 14 costs two more and 15 two more again, for a 27-point budget.
Scores above 15 are only reachable through racial bonuses.

Rule violations come back as a PointBuyResult with ``valid=False``; only
malformed input (missing keys, non-integer scores) raises.

Example:
    >>> result = validate({"str": 15, "dex": 15, "con": 15,
    ...                    "int": 8, "wis": 8, "cha": 8})
    >>> result.valid, result.points_remaining
    (True, 0)
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from dnd_forge.core.config import get_settings
from dnd_forge.core.constants import (
    POINT_BUY_COSTS,
    POINT_BUY_MAX,
    POINT_BUY_MIN,
    POINT_BUY_TOTAL,
)
from dnd_forge.core.logging import get_logger
from dnd_forge.models.character import (
    AbilityScores,
    PointBuyErrorKind,
    PointBuyResult,
    normalize_scores,
    require_int,
)


logger = get_logger(__name__)

ScoresInput = AbilityScores | Mapping[Any, Any]

# Each step past the maximum keeps the premium price of the 14 -> 15 step
_PREMIUM_STEP_COST = POINT_BUY_COSTS[POINT_BUY_MAX] - POINT_BUY_COSTS[POINT_BUY_MAX - 1]


def cost_of_score(score: int) -> int:
    """Cumulative point cost to raise a single score from 8.

    Args:
        score: The ability score.

    Returns:
        0 for scores of 8 or below, the PHB table value for 9-15. Scores
        above 15 keep costing 2 per step; they are never valid, but their
        cost still shows up in the totals reported by validate().

    Raises:
        MalformedInputError: If score is not an integer.
    """
    score = require_int(score, "score")
    if score < POINT_BUY_MIN:
        return 0
    if score <= POINT_BUY_MAX:
        return POINT_BUY_COSTS[score]
    return POINT_BUY_COSTS[POINT_BUY_MAX] + _PREMIUM_STEP_COST * (score - POINT_BUY_MAX)


def total_cost(scores: ScoresInput) -> int:
    """Total points spent across all six abilities.

    Raises:
        MalformedInputError: If scores is incomplete or non-integer.
    """
    return sum(cost_of_score(score) for score in normalize_scores(scores).values())


def remaining_points(scores: ScoresInput) -> int:
    """Points left to spend, never below zero."""
    return max(0, POINT_BUY_TOTAL - total_cost(scores))


def increment_cost(current_score: int) -> int:
    """Marginal cost of raising a score by one (0 once at the maximum).

    Raises:
        MalformedInputError: If current_score is not an integer.
    """
    current_score = require_int(current_score, "current_score")
    if current_score >= POINT_BUY_MAX:
        return 0
    return cost_of_score(current_score + 1) - cost_of_score(current_score)


def can_increase(current_score: int, all_scores: ScoresInput) -> bool:
    """Check whether a score can be raised by one within the rules.

    Args:
        current_score: The score the player wants to raise.
        all_scores: The full current spread (used for the remaining budget).

    Returns:
        True if the score is below 15 and the next step is affordable.
    """
    current_score = require_int(current_score, "current_score")
    if current_score >= POINT_BUY_MAX:
        return False
    return remaining_points(all_scores) >= increment_cost(current_score)


def can_decrease(current_score: int) -> bool:
    """Check whether a score can be lowered by one (never below 8)."""
    return require_int(current_score, "current_score") > POINT_BUY_MIN


def validate(scores: ScoresInput) -> PointBuyResult:
    """Validate a spread against the point-buy rules.

    Under-spending is allowed here; this is the check run on every edit.
    Use validate_submission() for the final character.

    Args:
        scores: AbilityScores or a mapping of the six scores.

    Returns:
        PointBuyResult with ``valid=False`` and an error message when a
        score is outside 8-15 or the budget is exceeded.

    Raises:
        MalformedInputError: If scores is incomplete or non-integer.
    """
    normalized = normalize_scores(scores)
    values = list(normalized.values())
    points_used = sum(cost_of_score(score) for score in values)
    max_score = max(values)
    min_score = min(values)
    points_remaining = POINT_BUY_TOTAL - points_used

    def result(error: str | None = None, kind: PointBuyErrorKind | None = None) -> PointBuyResult:
        return PointBuyResult(
            valid=error is None,
            points_used=points_used,
            points_remaining=points_remaining,
            max_score=max_score,
            min_score=min_score,
            error=error,
            error_kind=kind,
        )

    if min_score < POINT_BUY_MIN:
        logger.debug("Point buy rejected", reason="below_minimum", min_score=min_score)
        return result(
            f"All ability scores must be at least {POINT_BUY_MIN}",
            PointBuyErrorKind.INVALID_SCORE,
        )

    if max_score > POINT_BUY_MAX:
        logger.debug("Point buy rejected", reason="above_maximum", max_score=max_score)
        return result(
            f"All ability scores must be at most {POINT_BUY_MAX}",
            PointBuyErrorKind.INVALID_SCORE,
        )

    if points_used > POINT_BUY_TOTAL:
        logger.debug("Point buy rejected", reason="over_budget", points_used=points_used)
        return result(
            f"Point-buy total exceeds {POINT_BUY_TOTAL} points (used {points_used}); "
            "reduce some ability scores",
            PointBuyErrorKind.BUDGET_EXCEEDED,
        )

    return result()


def validate_submission(
    scores: ScoresInput,
    *,
    require_full_spend: bool | None = None,
) -> PointBuyResult:
    """Validate a spread for final character submission.

    Args:
        scores: AbilityScores or a mapping of the six scores.
        require_full_spend: Require exactly 27 points spent. Defaults to
            the ``rules.require_full_point_spend`` setting.

    Returns:
        The validate() result, additionally marked invalid with
        BUDGET_UNSPENT when points are left over and full spend is required.
    """
    result = validate(scores)
    if not result.valid:
        return result

    if require_full_spend is None:
        require_full_spend = get_settings().rules.require_full_point_spend

    if require_full_spend and result.points_used != POINT_BUY_TOTAL:
        logger.debug(
            "Point buy submission rejected",
            reason="under_budget",
            points_remaining=result.points_remaining,
        )
        return result.model_copy(
            update={
                "valid": False,
                "error": (
                    f"Spend all {POINT_BUY_TOTAL} points before finishing "
                    f"({result.points_remaining} remaining)"
                ),
                "error_kind": PointBuyErrorKind.BUDGET_UNSPENT,
            }
        )
    return result


def is_complete_build(scores: ScoresInput) -> bool:
    """True when the spread is valid and spends exactly 27 points."""
    return validate_submission(scores, require_full_spend=True).valid


__all__ = [
    "cost_of_score",
    "total_cost",
    "remaining_points",
    "increment_cost",
    "can_increase",
    "can_decrease",
    "validate",
    "validate_submission",
    "is_complete_build",
]
