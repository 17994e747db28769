"""
DOMAIN LAYER - Records, documents and the identities attached to them

This layer contains:
- Entities: Record (one stored entry), Document (one keyed list on disk)
- Value Objects: Identity (Authenticated | Anonymous)
- Ports: DocumentStore and EventLog interfaces
- Exceptions: DomainValidationError, StorageError

RULES:
1. NO framework imports (no FastAPI, Pydantic, dishka)
2. NO I/O operations (the store and log live in infrastructure)
3. Only depends on Python stdlib
"""
