"""
Runtime configuration for spanning forest runs.

The command-line driver builds a SpanningConfig from its arguments; library
callers can construct one directly or pass the equivalent keyword arguments
to the spanning functions.
"""

from typing import Optional

from .constants import DEFAULT_LOG_LEVEL


class SpanningConfig:
    """
    Configuration for a minimum spanning forest run.

    Attributes:
        span_all_components: Restart from every node not yet included so that
            each connected component gets its own tree
        max_memory_mb: Optional memory budget for a single run, in megabytes
        log_level: Logging level name used by the command-line driver
    """

    def __init__(
        self,
        span_all_components: bool = False,
        max_memory_mb: Optional[float] = None,
        log_level: str = DEFAULT_LOG_LEVEL,
    ):
        if max_memory_mb is not None and max_memory_mb <= 0:
            raise ValueError("max_memory_mb must be positive")
        self.span_all_components = span_all_components
        self.max_memory_mb = max_memory_mb
        self.log_level = log_level.upper()

    def __repr__(self) -> str:
        return (
            f"SpanningConfig(span_all_components={self.span_all_components}, "
            f"max_memory_mb={self.max_memory_mb}, log_level={self.log_level!r})"
        )
