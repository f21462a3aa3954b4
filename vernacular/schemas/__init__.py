"""Schemas — Pydantic DTOs for handing core values to presentation layers.

Invariants:
    - Schemas never mutate the core objects they are built from
    - Field order matches the order callers have always serialized in

Design Decisions:
    - from_*() classmethods over model_validate(obj): the core types are not
      attribute-compatible with the DTOs (variants, tuples, enums)
"""
