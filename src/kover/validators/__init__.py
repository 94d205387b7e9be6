"""Scene validation.

Token-level:
- lexical: identifier, integer and positive-integer syntax

Scene-level:
- scene: duplicate identifiers, building overlap, antenna collocation
"""
