"""
Display Record
A rendering function paired with the context it renders
"""
from typing import Any, Callable

from viewable.exceptions import NonStringResultException
from viewable.logging import getLogger

logger = getLogger(__name__)


class Display:
    """
    One registered rendering of a view

    The bound context is passed as the first positional argument,
    followed by whatever arguments the caller supplies:

        display = Display(shout, {'name': 'Alice'}, 'shout')
        display()  # shout({'name': 'Alice'})
    """

    def __init__(self, fn: Callable[..., str], context: Any, name: str):
        self.fn = fn
        self.context = context
        self.name = name

    def __call__(self, *args, **kwargs) -> str:
        result = self.fn(self.context, *args, **kwargs)

        if not isinstance(result, str):
            logger.debug(
                f"Display '{self.name}' returned {type(result).__name__}",
                extra={'display': self.name, 'result_type': type(result).__name__}
            )
            raise NonStringResultException(name=self.name, result_type=type(result))

        return result

    def __repr__(self):
        fn_name = getattr(self.fn, '__qualname__', repr(self.fn))
        return f'Display({self.name!r}, fn={fn_name}, context={type(self.context).__name__})'
