"""
Per-domain repository modules for database access.

Each module exposes plain functions taking a ``Session`` first. Repositories
carry no business rules: absence is reported as ``None`` or a zero row
count, and store failures surface as ``StoreError``.
"""
