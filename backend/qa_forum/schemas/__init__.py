"""Request and response models of the question API.

Invariants:
    - Inputs are validated here, before a handler or the database sees them
    - Every model serializes camelCase and accepts snake_case (schemas.base.CamelModel)
"""
