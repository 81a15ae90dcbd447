"""Depth limiting for nested construct evaluation.

A selected plural/select branch body may itself contain constructs, which the
evaluator resolves recursively. DepthGuard bounds that recursion so adversarial
or accidental deep nesting degrades to literal text instead of RecursionError.

Thread-safe: uses explicit state, no thread-local storage.
Python 3.13+.
"""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass, field

from icumsgkit.constants import MAX_DEPTH
from icumsgkit.diagnostics import ErrorTemplate, MessageResolutionError

__all__ = ["DepthGuard", "DepthLimitExceededError", "depth_clamp"]

logger = logging.getLogger(__name__)


class DepthLimitExceededError(MessageResolutionError):
    """Raised when maximum construct nesting depth is exceeded."""


@dataclass(slots=True)
class DepthGuard:
    """Counts how many selected branch bodies are being evaluated at once.

    One guard is created per evaluate_with_errors() call and entered around
    each branch body:

        with guard:
            text = self._resolve_pattern(body, ...)

    Attributes:
        max_depth: Deepest allowed nesting (default: MAX_DEPTH, clamped)
        current_depth: Branch bodies currently open
    """

    max_depth: int = MAX_DEPTH
    current_depth: int = field(default=0, init=False)

    def __post_init__(self) -> None:
        """Clamp max_depth against Python recursion limit."""
        self.max_depth = depth_clamp(self.max_depth)

    def __enter__(self) -> DepthGuard:
        """Enter guarded section, increment depth.

        Validates the limit BEFORE incrementing: __exit__ is not called when
        __enter__ raises, so incrementing first would leave the guard elevated.
        """
        if self.current_depth >= self.max_depth:
            raise DepthLimitExceededError(ErrorTemplate.max_depth_exceeded(self.max_depth))
        self.current_depth += 1
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: object,
    ) -> None:
        """Exit guarded section, decrement depth."""
        self.current_depth -= 1

    @property
    def depth(self) -> int:
        """Current depth (alias for current_depth)."""
        return self.current_depth

    def is_exceeded(self) -> bool:
        """Check if depth limit has been reached."""
        return self.current_depth >= self.max_depth


# Python frames consumed per nesting level: _resolve_branch,
# _resolve_pattern, _resolve_construct.
_FRAMES_PER_LEVEL = 3


def depth_clamp(requested_depth: int, reserve_frames: int = 50) -> int:
    """Lower requested_depth until nested evaluation fits the recursion limit.

    A warning is logged when the value is lowered. With the default
    recursion limit of 1000, depth_clamp(5000) returns 316.
    """
    limit = sys.getrecursionlimit()
    max_safe_depth = max(1, (limit - reserve_frames) // _FRAMES_PER_LEVEL)
    if requested_depth <= max_safe_depth:
        return requested_depth
    logger.warning(
        "max_depth %d is too deep for recursion limit %d. Clamping to %d",
        requested_depth,
        limit,
        max_safe_depth,
    )
    return max_safe_depth
