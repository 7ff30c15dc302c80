from .api import ApiClient, ApiResult
from .shell import ClientShell

__all__ = ["ApiClient", "ApiResult", "ClientShell"]
