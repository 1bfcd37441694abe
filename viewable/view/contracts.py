"""
Viewable Contracts
Conventions by which types expose their views
"""
from abc import ABC
from typing import Any

from viewable.helpers import view as make_view


class Viewable(ABC):
    """
    Base class for types whose instances render themselves

    The base `view` has no default display and no displays. Subclasses
    override the property and bind the view to `self`:

        class Person(Viewable):
            def __init__(self, name):
                self.name = name

            @property
            def view(self):
                # person.view()
                return View(lambda p: f'<span>{p.name}</span>', self) \\
                    .add_display(cap)  # person.view.cap(True)
    """

    @property
    def view(self):
        """Render this object as a string"""
        return make_view(self)


class ViewableStatic(ABC):
    """
    Base class for non-instantiable types that render external data

        class Util(ViewableStatic):
            @classmethod
            def view(cls, data):
                # Util.view(person).person()
                return View(None, data).add_display(person)

    Instantiating a subclass raises TypeError.
    """

    def __new__(cls, *args, **kwargs):
        raise TypeError(f"{cls.__name__} is static and cannot be instantiated")

    @classmethod
    def view(cls, data: Any):
        """Render data as a string"""
        return make_view(data)


def is_viewable(obj: Any) -> bool:
    """
    Check whether an object follows one of the viewable conventions

    True for Viewable instances and ViewableStatic subclasses.
    """
    if isinstance(obj, Viewable):
        return True
    return isinstance(obj, type) and issubclass(obj, ViewableStatic)
