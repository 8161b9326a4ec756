"""
Access results and the rule used to combine them.

Individual evaluators return ALLOW, DENY or NEUTRAL. The combined verdict is:
an explicit DENY wins, otherwise any explicit ALLOW wins, otherwise access is
denied.
"""
from enum import Enum
from typing import Iterable


class AccessResult(str, Enum):
    allow = "allow"
    deny = "deny"
    neutral = "neutral"

    @property
    def is_allowed(self) -> bool:
        return self is AccessResult.allow

    @property
    def is_forbidden(self) -> bool:
        return self is AccessResult.deny


def combine(results: Iterable[AccessResult]) -> AccessResult:
    """Fold evaluator results into one verdict; NEUTRAL means nobody decided."""
    verdict = AccessResult.neutral
    for result in results:
        if result.is_forbidden:
            return AccessResult.deny
        if result.is_allowed:
            verdict = AccessResult.allow
    return verdict


def is_granted(results: Iterable[AccessResult]) -> bool:
    # neutral falls through to the default deny
    return combine(results).is_allowed
