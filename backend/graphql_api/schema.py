"""Main GraphQL schema factory for the health backend.

This module provides a factory function to create the complete GraphQL schema.
The Query class is defined in app.py to avoid circular imports and maintain a
single source of truth.

Usage:
    from graphql_api.schema import create_schema
    schema = create_schema()
"""

import strawberry


def create_schema() -> strawberry.Schema:
    """Create Strawberry schema with all integrated resolvers.

    Returns:
        Configured Strawberry Schema instance
    """
    # Import here to avoid circular dependency
    from app import Query

    return strawberry.Schema(query=Query)
