"""
Reference source clients.

- FreeDictionaryClient: api.dictionaryapi.dev entries
- WikipediaClient: Wikipedia REST page summaries
- StubThesaurusClient: placeholder returning empty data
"""

from .base_client import BaseSourceClient
from .dictionary import FreeDictionaryClient
from .thesaurus import StubThesaurusClient
from .wikipedia import WikipediaClient

__all__ = [
    "BaseSourceClient",
    "FreeDictionaryClient",
    "StubThesaurusClient",
    "WikipediaClient",
]
