from .auth import Scope, authenticate, authorize
from .permission import check_permission
from .principal import Principal

__all__ = ["Principal", "Scope", "authenticate", "authorize", "check_permission"]
