"""
Test suite for recursive sort.

Focus areas:
- Type priority ordering
- Canonicalization determinism (idempotence, permutation invariance)
- Strict and permissive handling of missing sort keys/fields
- Order-insensitive document equality
"""
