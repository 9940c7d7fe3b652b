"""
Typed errors raised by the ranking engine.

Each error carries the HTTP status the server should answer with; the engine
itself never touches transport.
"""

from typing import List, Optional


class RankingError(Exception):
    """Base class for ranking, search, and store failures."""

    status_code: int = 500
    error: str = "Ranking failed"

    def __init__(self, message: Optional[str] = None):
        super().__init__(message or self.error)
        self.message = message or self.error


class ValidationError(RankingError):
    """Bad or missing query/threshold input."""

    status_code = 400
    error = "Invalid request"


class InvalidAlgorithm(RankingError):
    """Unknown scoring key. `available` lists the registered keys."""

    status_code = 400
    error = "Invalid algorithm"

    def __init__(self, algorithm: str, available: List[str]):
        super().__init__(f"Invalid algorithm: {algorithm}")
        self.algorithm = algorithm
        self.available = list(available)


class StoreUnavailable(RankingError):
    """The record store could not be read."""

    status_code = 500
    error = "Failed to load users"
