"""Search query execution for check annotations."""

from .elasticsearch import ElasticsearchQuery
from .orchestrator import GraphOutcome, GraphRetriever, QueryOrchestrator, QueryOutcome

__all__ = [
    "ElasticsearchQuery",
    "GraphOutcome",
    "GraphRetriever",
    "QueryOrchestrator",
    "QueryOutcome",
]
