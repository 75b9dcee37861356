"""Core — forum vocabulary and pure reshaping.

Invariants:
    - Nothing in core/ performs IO or imports from db/, models/, services/ or api/
    - Functions here take plain values or already-loaded rows and return new values

Design Decisions:
    - Rank column choice, tag flattening, pagination math and the error taxonomy
      live here so they can be tested without a database
"""
