"""
transport_core – structured logging façade for transport services.

Import path convention::

    from transport_core.observability.logging import Logger, new_logger
    from transport_core.adapters.fastapi import RequestLoggingMiddleware, must_get
    from transport_core.adapters.mg_transport import MGTransportClientAdapter
    from transport_core.testing import JSONRecordScanner
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
