"""GraphQL layer (Strawberry) for the health metrics engine."""
