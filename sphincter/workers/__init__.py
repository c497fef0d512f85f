# =======================================================================================
# sphincter/workers/__init__.py - Workers Package
# =======================================================================================
from .reader_worker import ReaderWorker

__all__ = ["ReaderWorker"]
