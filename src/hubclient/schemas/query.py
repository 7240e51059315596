"""
GraphQL Schema Definitions

GraphQL responses are returned to the caller as decoded JSON, so only
the request side is modelled here.
"""

from dataclasses import dataclass, field
from typing import Any, Dict


@dataclass(frozen=True)
class GraphQLRequest:
    """
    A GraphQL query and its variables.

    Attributes:
        query: GraphQL document text
        variables: Variable values referenced by the query
    """

    query: str
    variables: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the wire payload."""
        return {"query": self.query, "variables": self.variables}
