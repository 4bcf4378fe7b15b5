"""oktasync - resumable page-by-page sync of Okta collections."""

from .connectors.okta import OktaAdapter, OktaConfig, OktaDatasource
from .core import EntityKind, ErrorCode, OktaSyncError
from .models import (
    AttributeConfig,
    DatasourceAuth,
    EntityConfig,
    GetPageRequest,
    Page,
)

__version__ = "0.1.0"

__all__ = [
    "OktaAdapter",
    "OktaConfig",
    "OktaDatasource",
    "EntityKind",
    "ErrorCode",
    "OktaSyncError",
    "AttributeConfig",
    "DatasourceAuth",
    "EntityConfig",
    "GetPageRequest",
    "Page",
]
