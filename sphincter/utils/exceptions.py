# =======================================================================================
# sphincter/utils/exceptions.py - Custom Exceptions
# =======================================================================================
class SphincterError(Exception):
    """Base exception for the door controller."""
    pass

class ConfigurationError(SphincterError):
    """Raised when the token list or a setting cannot be loaded."""
    pass

class StreamFault(SphincterError):
    """Raised when the credential reader stream fails or closes.

    Fatal: the framing state is undefined afterwards, so the process is
    expected to exit and be restarted by its supervisor.
    """
    pass

class UnknownCommandError(SphincterError):
    """Raised when a value is not a known actuation command."""
    pass
