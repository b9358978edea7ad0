"""
Lookup pipeline.

Key Components:
- normalize_query / require_query: query cleanup
- ContentClassifier: Word / Entity heuristics
- SourceAggregator: source selection and merging
- LookupService: the public lookup contract
"""

from .aggregator import SOURCE_PLAN, SourceAggregator
from .classifier import ContentClassifier
from .normalizer import normalize_query, require_query
from .ports import DictionarySource, EncyclopediaSource, ThesaurusSource
from .service import LookupService, lookup, lookup_sync

__all__ = [
    "SOURCE_PLAN",
    "ContentClassifier",
    "DictionarySource",
    "EncyclopediaSource",
    "LookupService",
    "SourceAggregator",
    "ThesaurusSource",
    "lookup",
    "lookup_sync",
    "normalize_query",
    "require_query",
]
