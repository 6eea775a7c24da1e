"""
Timeline validation for yday.

Step 4 of the timeline pipeline: checks each week pattern against its
repository total. Below saturation a pattern is an exact encoding; once
a slot shows the overflow marker it is only a lower bound. Reports, never
raises; callers decide whether a failure is fatal.
"""

from typing import Iterable, Optional, Tuple, Union

from yday.models.entities import (
    DIGIT_MARKERS, EMPTY_MARKER, OVERFLOW_MARKER, SATURATION_COUNT,
    TimelineItem, ValidationResult, WeekPattern,
)


def pattern_sums(pattern: Union[WeekPattern, str]) -> Optional[Tuple[int, int, bool]]:
    """
    Sum a pattern.

    Returns (exact_sum, minimum_sum, saturated), or None if the pattern is
    not seven known symbols.
    """
    symbols = tuple(str(pattern))
    if len(symbols) != 7:
        return None

    exact_sum = 0
    minimum_sum = 0
    saturated = False
    for symbol in symbols:
        if symbol == EMPTY_MARKER:
            continue
        if symbol == OVERFLOW_MARKER:
            saturated = True
            minimum_sum += SATURATION_COUNT
        elif symbol in DIGIT_MARKERS:
            exact_sum += int(symbol)
            minimum_sum += int(symbol)
        else:
            return None
    return exact_sum, minimum_sum, saturated


def check_item(item: TimelineItem) -> Optional[str]:
    """Error message for one item, or None when it is consistent."""
    if item.pattern is None:
        return None

    sums = pattern_sums(item.pattern)
    if sums is None:
        return f"{item.repository_name}: Malformed pattern '{item.pattern}'"

    exact_sum, minimum_sum, saturated = sums
    if saturated:
        if item.total_commits < minimum_sum:
            return (f"{item.repository_name}: Pattern shows at least {minimum_sum} "
                    f"commits but total is {item.total_commits}")
    elif exact_sum != item.total_commits:
        return (f"{item.repository_name}: Pattern shows {exact_sum} "
                f"commits but total is {item.total_commits}")
    return None


def validate(items: Iterable[TimelineItem]) -> ValidationResult:
    """
    Validate timeline math for every item that carries a pattern.

    Args:
        items: Output of render()

    Returns:
        ValidationResult with one error per inconsistent repository
    """
    errors = []
    for item in items:
        try:
            error = check_item(item)
        except (AttributeError, TypeError) as e:
            error = f"{getattr(item, 'repository_name', '?')}: Unreadable timeline item ({e})"
        if error:
            errors.append(error)

    return ValidationResult(is_valid=not errors, errors=errors)
