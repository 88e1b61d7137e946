"""Working-copy status aggregation and token rendering."""

from status.aggregator import StatusAggregator, aggregate
from status.alphabet import FILE_NAME_SAFE, STANDARD, Alphabet
from status.config import RevisionConfig
from status.encoder import StatusEncoder, encode
from status.types import AggregationResult, StatusKind, StatusRecord

__all__ = [
    "AggregationResult",
    "Alphabet",
    "FILE_NAME_SAFE",
    "RevisionConfig",
    "STANDARD",
    "StatusAggregator",
    "StatusEncoder",
    "StatusKind",
    "StatusRecord",
    "aggregate",
    "encode",
]
