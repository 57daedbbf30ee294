from strict_emitter.constants import NEW_LISTENER, PACKAGE, REMOVE_LISTENER
from strict_emitter.emitter import Emitter, OnceListener
from strict_emitter.exceptions import MemoryLeakWarning
from strict_emitter.lib.logger import configure_logger
from strict_emitter.version import __version__

VERSION = __version__

__all__ = [
    "VERSION",
    "PACKAGE",
    "NEW_LISTENER",
    "REMOVE_LISTENER",
    Emitter.__name__,
    OnceListener.__name__,
    MemoryLeakWarning.__name__,
    configure_logger.__name__,
]
