"""Language Buddy backend — accounts, learning progress, notebook and mistake log.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
