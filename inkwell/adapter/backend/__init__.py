"""Hosted backend adapters."""

from .auth import MockAuthProvider, RealAuthProvider
from .client import RecordStoreClient, TableQuery
from .functions import MockFunctionInvoker, RealFunctionInvoker
from .storage import MockObjectStorage, RealObjectStorage

__all__ = [
    "MockAuthProvider",
    "MockFunctionInvoker",
    "MockObjectStorage",
    "RealAuthProvider",
    "RealFunctionInvoker",
    "RealObjectStorage",
    "RecordStoreClient",
    "TableQuery",
]
