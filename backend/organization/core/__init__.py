"""Core Layer — pure domain logic, no IO, no DB.

Invariants:
    - No module in core/ imports from services/, api/, infrastructure/, or db/
    - Everything except the store Protocol is synchronous and deterministic

Design Decisions:
    - Functional core separated from imperative shell: the controller in services/
      orchestrates the async store calls around these pure pieces
"""
