"""Users API Package — HTTP service skeleton with a closed error taxonomy.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
