from searchclasspath.search.duplicates import DuplicateIndex
from searchclasspath.search.engine import SearchContext, SearchEngine

__all__ = ["DuplicateIndex", "SearchContext", "SearchEngine"]
