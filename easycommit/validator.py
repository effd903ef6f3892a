"""Concurrent rule-based commit validator.

Runs a list of independent, pure validation rules against one commit record
on a bounded thread pool, under an optional deadline and cancellation event.

Contains:
- Rule: Type alias for a validation rule
- make_rule: Adapt a raising record check into a Rule
- default_rules: The standard per-field rules bound to a ValidationConfig
- RuleValidator: The worker-pool validator
"""

import logging
import threading
import time
from concurrent.futures import FIRST_COMPLETED, Future, ThreadPoolExecutor, wait
from typing import Callable, Optional

from easycommit.commit import (
    RECORD_RULES,
    CommitRecord,
    CommitValidationError,
    ValidationConfig,
)
from easycommit.exceptions import ValidationTimeoutError

logger = logging.getLogger(__name__)

DEFAULT_WORKER_COUNT = 4

# How often waiting workers re-check the cancellation event
_CANCEL_POLL_INTERVAL = 0.05

Rule = Callable[[CommitRecord], Optional[CommitValidationError]]


def make_rule(
    check: Callable[[CommitRecord, ValidationConfig], None],
    config: ValidationConfig,
) -> Rule:
    """Turn a check that raises into a rule that returns its error.

    Args:
        check: A function raising CommitValidationError on failure.
        config: Limits passed to the check.

    Returns:
        A rule returning the error, or None when the record passes.
    """

    def rule(record: CommitRecord) -> Optional[CommitValidationError]:
        try:
            check(record, config)
        except CommitValidationError as e:
            return e
        return None

    rule.__name__ = getattr(check, "__name__", "rule")
    return rule


def default_rules(config: ValidationConfig) -> list[Rule]:
    """Build the standard rules (type, description, scope, body)."""
    return [make_rule(check, config) for check in RECORD_RULES]


class RuleValidator:
    """Validate commit records by running rules on a pool of workers.

    When several rules fail, the error of the earliest-registered rule is
    raised, independent of which worker finished first.

    Rules must always return. After a timeout or cancellation, rules that
    have not started are dropped, but a rule already running keeps its worker
    thread until it returns, and the interpreter waits for it at exit.

    Args:
        config: Limits used by the default rules.
        worker_count: Number of worker threads. Non-positive values fall back
            to DEFAULT_WORKER_COUNT.
        rules: Rules to run instead of the defaults.
    """

    def __init__(
        self,
        config: Optional[ValidationConfig] = None,
        worker_count: int = DEFAULT_WORKER_COUNT,
        rules: Optional[list[Rule]] = None,
    ):
        self.config = config or ValidationConfig()
        self.worker_count = worker_count if worker_count > 0 else DEFAULT_WORKER_COUNT
        self._rules: list[Rule] = list(rules) if rules is not None else default_rules(self.config)

    @property
    def rules(self) -> list[Rule]:
        """A copy of the registered rules, in registration order."""
        return list(self._rules)

    def add_rule(self, rule: Rule) -> None:
        """Register an additional rule after the existing ones.

        The rule must be pure and must return in bounded time.
        """
        self._rules.append(rule)

    def validate(
        self,
        record: CommitRecord,
        timeout: Optional[float] = None,
        cancel_event: Optional[threading.Event] = None,
    ) -> None:
        """Run every rule against the record.

        Args:
            record: The commit record to check. It is never modified.
            timeout: Seconds allowed for all rules to report.
            cancel_event: Set by the caller to abandon validation.

        Raises:
            CommitValidationError: The failure of the earliest-registered failing rule.
            ValidationTimeoutError: If the deadline passes or cancel_event is
                set before the outcome is known.
        """
        if not self._rules:
            return

        deadline = time.monotonic() + timeout if timeout is not None else None
        executor = ThreadPoolExecutor(
            max_workers=self.worker_count,
            thread_name_prefix="easycommit-rule",
        )
        logger.debug("Validating with %d rules on %d workers", len(self._rules), self.worker_count)

        try:
            futures: dict[Future, int] = {
                executor.submit(rule, record): index for index, rule in enumerate(self._rules)
            }
            pending = set(futures)
            reported: set[int] = set()
            failures: dict[int, CommitValidationError] = {}

            while pending:
                if cancel_event is not None and cancel_event.is_set():
                    raise ValidationTimeoutError(timeout, cancelled=True)

                wait_for = None
                if deadline is not None:
                    remaining = deadline - time.monotonic()
                    if remaining <= 0:
                        raise ValidationTimeoutError(timeout)
                    wait_for = remaining
                if cancel_event is not None:
                    wait_for = _CANCEL_POLL_INTERVAL if wait_for is None else min(wait_for, _CANCEL_POLL_INTERVAL)

                done, pending = wait(pending, timeout=wait_for, return_when=FIRST_COMPLETED)
                for future in done:
                    index = futures[future]
                    reported.add(index)
                    error = future.result()
                    if error is not None:
                        failures[index] = error

                # Stop early once no earlier rule can still fail
                if failures:
                    first = min(failures)
                    if all(index in reported for index in range(first)):
                        raise failures[first]
        finally:
            executor.shutdown(wait=False, cancel_futures=True)
