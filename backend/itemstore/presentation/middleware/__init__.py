from itemstore.presentation.middleware.correlation import CorrelationIdMiddleware
from itemstore.presentation.middleware.request_audit import RequestAuditMiddleware

__all__ = ["CorrelationIdMiddleware", "RequestAuditMiddleware"]
