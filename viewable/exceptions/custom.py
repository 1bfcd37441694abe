"""
Custom Exception Classes
View-specific exceptions carrying the offending display name
"""
from typing import Optional


class ViewException(Exception):
    """Base exception for all view exceptions"""
    message = "A view error occurred"

    def __init__(self, message: Optional[str] = None, name: Optional[str] = None):
        self.message = message or self.__class__.message
        super().__init__(self.message)
        self.name = name


class MissingDefaultDisplayException(ViewException, TypeError):
    """
    Missing default display exception

    Raised when a view constructed without a default display is called

    Example:
        View(None, data)()  # raises MissingDefaultDisplayException
    """
    message = "This view has no default display"


class UnknownDisplayException(ViewException, AttributeError):
    """
    Unknown display exception

    Raised when a named display was never registered on the view.
    Subclasses AttributeError so getattr() defaults and hasattr() keep working.

    Example:
        raise UnknownDisplayException(name='shout')
    """
    message = "Unknown display"

    def __init__(self, message: Optional[str] = None, name: Optional[str] = None):
        if message is None and name is not None:
            message = f"View has no display named '{name}'"
        super().__init__(message, name)


class InvalidRendererException(ViewException, ValueError):
    """
    Invalid renderer exception

    Raised when a renderer is not callable or has no usable display name

    Example:
        view.add_display(lambda data: '')  # anonymous, raises InvalidRendererException
    """
    message = "Invalid renderer"


class NonStringResultException(ViewException, TypeError):
    """
    Non-string result exception

    Raised when a renderer returns something other than a string

    Example:
        raise NonStringResultException(name='shout', result_type=int)
    """
    message = "The display did not return a string"

    def __init__(
        self,
        message: Optional[str] = None,
        name: Optional[str] = None,
        result_type: Optional[type] = None
    ):
        if message is None and result_type is not None:
            message = f"Display '{name}' returned {result_type.__name__}, expected str"
        super().__init__(message, name)
        self.result_type = result_type
