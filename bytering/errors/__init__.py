from bytering.errors.fatal import BackendInitializationError, ConfigurationError, RingBufferError
from bytering.errors.kinds import ErrorKind

__all__ = ["ErrorKind", "RingBufferError", "ConfigurationError", "BackendInitializationError"]
