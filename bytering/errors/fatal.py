# FILE: bytering/errors/fatal.py
# ------------------------------------------------------------------------------
class RingBufferError(Exception):
    def __init__(self, message, context=None):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)

class ConfigurationError(RingBufferError):
    pass

class BackendInitializationError(RingBufferError):
    pass
