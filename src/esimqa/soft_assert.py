"""
Soft assertions for scenarios that check several independent fields.

A scenario records each field-level expectation with ``check`` and
reports every mismatch at once with ``finalize``. Nothing raises while
checking, so a mismatch on the first field never hides the state of the
others.

Example:
    soft = SoftAssertions()
    soft.check("Package Title", title, "Moshi Moshi")
    soft.check("Package Price", price, "$4.50")
    soft.finalize()
"""

import logging
from dataclasses import dataclass
from typing import Any, Optional

from .exceptions import SoftAssertionError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AssertionFailure:
    """One recorded mismatch."""

    field: str
    actual: Any
    expected: Any

    @property
    def message(self) -> str:
        return (
            f'{self.field} Assertion Failed: Actual Field is "{self.actual}" '
            f'and Expected Field is "{self.expected}"'
        )


class SoftAssertions:
    """Collects field mismatches for one scenario run."""

    def __init__(self) -> None:
        self._failures: list[AssertionFailure] = []
        self._finalized = False

    def __len__(self) -> int:
        return len(self._failures)

    def __enter__(self) -> "SoftAssertions":
        return self

    def __exit__(self, exc_type, exc, tb) -> Optional[bool]:
        if exc_type is not None:
            # The block's own error wins; keep what was collected visible.
            for failure in self._failures:
                logger.error(failure.message)
            return None
        self.finalize()
        return None

    @property
    def failures(self) -> tuple[AssertionFailure, ...]:
        """Recorded failures in evaluation order."""
        return tuple(self._failures)

    @property
    def passed(self) -> bool:
        """True while no mismatch has been recorded."""
        return not self._failures

    def messages(self) -> list[str]:
        """Failure lines in evaluation order."""
        return [failure.message for failure in self._failures]

    def check(self, field: str, actual: Any, expected: Any) -> bool:
        """
        Compare ``actual`` with ``expected`` and record a mismatch.

        Args:
            field: Human-readable field name used in the failure line.
            actual: Value read from the system under test.
            expected: Golden value.

        Returns:
            True when the values matched. A check made after finalize()
            is still compared and recorded, but is never reported.
        """
        try:
            matched = type(actual) is type(expected) and bool(actual == expected)
        except Exception:
            # An uncomparable value is a mismatch like any other.
            matched = False

        if not matched:
            failure = AssertionFailure(field, actual, expected)
            self._failures.append(failure)
            logger.warning(failure.message)
        if self._finalized:
            logger.warning("%s checked after finalize(); result not reported", field)
        return matched

    def finalize(self) -> None:
        """
        Report the run's outcome.

        Raises:
            SoftAssertionError: If any check failed, carrying every failure.
            RuntimeError: If called more than once.
        """
        if self._finalized:
            raise RuntimeError("finalize() called more than once")
        self._finalized = True

        if self._failures:
            raise SoftAssertionError(self._failures)
        logger.debug("All soft assertions passed")
