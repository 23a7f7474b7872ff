#!/usr/bin/env python3
"""
Error taxonomy for the match engine.

- InputError: malformed or unknown talent/startup identity. Never retried.
- MatchNotFound: no record for a requested pair (an InputError).
- AccessDenied: viewer context does not own the requested data.
- StoreUnavailable: the backing store cannot be reached. Writes retry with
  backoff; reads fail fast.
- ConflictError: a concurrent upsert race that survived the retry-as-update path.
- PartialBatchFailure: some pairs of a batch failed while others succeeded.
"""

from typing import Any, List, Optional


class MatchEngineError(Exception):
    """Base exception for match engine errors."""
    pass


class InputError(MatchEngineError):
    """Raised when a talent/startup identity or policy input is malformed."""
    pass


class MatchNotFound(InputError):
    """Raised when no match record exists for the requested pair."""
    pass


class AccessDenied(MatchEngineError):
    """Raised when the viewer is not allowed to read the requested matches."""
    pass


class StoreUnavailable(MatchEngineError):
    """Raised when the match store or profile repository cannot be reached."""

    retryable = True


class ConflictError(MatchEngineError):
    """Raised when an upsert keeps losing the race for the same pair."""

    def __init__(self, talent_id: Any, startup_id: Any, attempts: int):
        self.talent_id = talent_id
        self.startup_id = startup_id
        self.attempts = attempts
        super().__init__(
            f"Upsert for talent {talent_id} / startup {startup_id} "
            f"still conflicting after {attempts} attempts"
        )


class PartialBatchFailure(MatchEngineError):
    """Raised on request when one or more pairs of a batch failed.

    Carries the full per-pair result list so callers can see which pairs
    were written and which were not.
    """

    def __init__(self, results: List[Any], message: Optional[str] = None):
        self.results = results
        failed = [r for r in results if getattr(r, 'status', None) == 'failed']
        self.failed = failed
        super().__init__(message or f"{len(failed)} of {len(results)} pairs failed")
