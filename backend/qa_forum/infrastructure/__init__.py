"""Infrastructure — engine/session lifecycle and log formatting.

Invariants:
    - Nothing here imports services/ or api/
    - Exceptions leave this layer unchanged; services.error_handling names them
"""
