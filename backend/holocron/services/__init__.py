"""Services Layer — async orchestration around the pure core.

Invariants:
    - Services talk to IO only through core/repository_protocols.py types
    - Business decisions (conflict policy, validation) live in core/, not here

Design Decisions:
    - One service per use case: sync pass vs direct catalog edits
"""
