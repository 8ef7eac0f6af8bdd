"""
Binding Errors

Exceptions raised when a context function cannot resolve its context.
"""


class BindingError(Exception):
    """Base exception for context binding operations"""
    pass

class UnboundContextError(BindingError):
    """Raised when a strict context function is invoked without a context"""
    pass

class CapabilityNotFoundError(BindingError):
    """Raised when a record does not expose the requested capability"""
    pass
