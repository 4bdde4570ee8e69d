"""Domain layer for health metrics and diet recommendations.

Pure business rules, decoupled from the GraphQL/REST presentation and from
infrastructure wiring.
"""
