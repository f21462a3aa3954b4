"""Models — persistent entities built on the core identity and civilized protocol.

Invariants:
    - Every model is a PersistentObject, so it is also a CivilizedObject
    - Models hold data and civilized rules only; storage is the host's concern

Design Decisions:
    - One file per entity for locality
"""

from vernacular.models.audit_log import AuditLog  # noqa: F401
