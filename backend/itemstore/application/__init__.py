"""
APPLICATION LAYER - Use cases over the document store

This layer contains:
- commands/  → Write operations (append a record)
- queries/   → Read operations (list, filter by user)
- common/    → Shared interfaces (Command, Query base classes)

Rules:
- Depends on Domain layer only
- No HTTP/framework code here
"""
