# =======================================================================================
# sphincter/utils/__init__.py - Utils Package
# =======================================================================================
from .exceptions import *
from .validators import *

__all__ = [
    "SphincterError", "ConfigurationError", "StreamFault",
    "UnknownCommandError", "TokenValidator", "is_noise_token",
]
