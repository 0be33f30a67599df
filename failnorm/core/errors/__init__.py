# failnorm/core/errors/__init__.py
"""
Core failure handling for failnorm.

This package defines the components responsible for:
- Representing failures (UncheckedError, envelopes)
- Classifying failures (FailureKind, FailurePolicy)
- Normalizing and describing failures (FailureNormalizer)

No side effects on import.
"""
