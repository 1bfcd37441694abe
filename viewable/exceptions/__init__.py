"""
Exceptions Package
Errors raised by views and their displays
"""
from viewable.exceptions.custom import (
    ViewException,
    MissingDefaultDisplayException,
    UnknownDisplayException,
    InvalidRendererException,
    NonStringResultException,
)

__all__ = [
    'ViewException',
    'MissingDefaultDisplayException',
    'UnknownDisplayException',
    'InvalidRendererException',
    'NonStringResultException',
]
