"""HR Core package.

Organized by feature modules (employees, leave, attendance, ...) around a
single domain state store persisted through a key-value storage adapter.
"""
