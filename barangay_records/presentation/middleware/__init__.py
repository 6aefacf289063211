from barangay_records.presentation.middleware.correlation import CorrelationIDMiddleware
from barangay_records.presentation.middleware.rate_limit import limiter

__all__ = ["CorrelationIDMiddleware", "limiter"]
