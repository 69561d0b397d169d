from .expander import expand_to_parents
from .models import SearchHit
from .search import DEFAULT_TOP_K, Retriever

__all__ = [
    "DEFAULT_TOP_K",
    "Retriever",
    "SearchHit",
    "expand_to_parents",
]
