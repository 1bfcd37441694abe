"""
Helper Functions
Shortcuts for building views and naming displays
"""
from typing import Any, Callable, Optional


def view(data: Any = None, default: Optional[Callable[[Any], str]] = None, *displays: Callable[..., str]):
    """
    Create a view of data with displays attached

    Args:
        data: The data to display
        default: Default display, or None for a view without one
        *displays: Named display functions, attached in order

    Returns:
        View instance

    Example:
        card = view(user, render_card, title, avatar)
        card()         # render_card(user)
        card.title()   # title(user)
    """
    from viewable.view.view import View

    result = View(default, data)
    for fn in displays:
        result.add_display(fn)
    return result


def display(name: str):
    """
    Give a rendering function an explicit display name

    Needed for lambdas, or when the display name should differ
    from the Python function name. The function is renamed in place:
    its __name__ and the last part of its __qualname__ change for every
    reference to it, so wrap it first if the original name must survive.

    Example:
        v.add_display(display('badge')(lambda d: f"<b>{d['id']}</b>"))

        @display('kind')
        def css_kind(d):
            return d['kind']
    """
    def decorator(fn: Callable[..., str]) -> Callable[..., str]:
        fn.__name__ = name
        prefix, dot, _ = getattr(fn, '__qualname__', '').rpartition('.')
        fn.__qualname__ = prefix + dot + name
        return fn

    return decorator
