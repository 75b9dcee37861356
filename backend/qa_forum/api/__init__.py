"""HTTP layer: caller identity, route functions and the JSON error envelope.

Invariants:
    - Route functions only translate HTTP to handler inputs and back
"""
