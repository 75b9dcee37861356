"""Selector Presets — reusable field-selection fragments composed into queries.

Invariants:
    - Each preset pairs loader options with the projection that reads exactly
      what those options load (no lazy loads under AsyncSession)
"""
