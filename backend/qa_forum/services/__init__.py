"""Services Layer — question persistence, error boundary and request handlers.

Invariants:
    - question_service talks to the database; handle_questions never builds SQL itself
    - Every handler call site goes through error_handling.db_error_boundary

Design Decisions:
    - Handlers and service split: handlers own selection and shaping, services own queries
"""
