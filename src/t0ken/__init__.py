__version__ = "0.1.0"

__all__ = [
    "__version__",
    # Errors
    "T0kenError",
    "ArgumentError",
    "ResolutionError",
    "NetworkError",
    "ContractCallError",
    "ArtifactError",
    # Chain
    "Connection",
    "CallSession",
    "NonceAllocator",
    "Transactor",
    # Keys
    "get_account",
    "resolve_address",
]

from .errors import (
    ArgumentError,
    ArtifactError,
    ContractCallError,
    NetworkError,
    ResolutionError,
    T0kenError,
)
from .chain.conn import Connection
from .chain.nonce import NonceAllocator
from .chain.session import CallSession
from .chain.tx import Transactor
from .keys import get_account, resolve_address
