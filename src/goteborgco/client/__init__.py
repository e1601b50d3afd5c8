"""HTTP execution of GraphQL queries."""

from goteborgco.client.executor import GraphQLExecutor, KeyLocation

__all__ = ["GraphQLExecutor", "KeyLocation"]
