"""
View
A callable object binding one piece of data to a default display
and an open set of named displays
"""
import keyword
import threading
from typing import Any, Callable, Dict, List, Optional

from viewable.defaults import DEFAULT_DISPLAY_NAME, DEFAULT_STRICT_NAMES
from viewable.exceptions import (
    MissingDefaultDisplayException,
    UnknownDisplayException,
    InvalidRendererException,
)
from viewable.logging import getLogger
from viewable.support import Config
from viewable.view.display import Display

logger = getLogger(__name__)

# Marks an omitted this_arg, since None is a legitimate context
_UNSET = object()


class View:
    """
    Methods of displaying a piece of data

    A View is called like a function for its default display, and exposes
    every display added later as a method of the same name. Each rendering
    function receives the data as its first argument.

    Construct a view with a default display:
        data = {'text': 'some data', 'id': 'my-id', 'value': 42}
        spanview = View(lambda d: f"<span>{d['text']}</span>", data)
        spanview()  # '<span>some data</span>'

    Pass None instead of a function for views with no default display
    (typical for static views). Calling such a view raises
    MissingDefaultDisplayException:
        View(None, data)()

    Add more displays. The function name becomes the display name:
        def custom1(d, content):
            return f'<span id="{d["id"]}">{content}</span>'

        spanview.add_display(custom1)
        spanview.custom1('my content')  # '<span id="my-id">my content</span>'

    Optionally render a display against other data:
        spanview.add_display(custom2, other_data)

    add_display returns the view, so calls can be chained.
    """

    def __init__(self, fn: Optional[Callable[[Any], str]], data: Any = None):
        """
        Args:
            fn: The default display, called with the data; or None for no default
            data: The data this view displays
        """
        if fn is not None and not callable(fn):
            raise InvalidRendererException(
                f"Default display must be callable or None, got {type(fn).__name__}",
                name=DEFAULT_DISPLAY_NAME
            )

        self._data = data
        self._default = Display(fn, data, DEFAULT_DISPLAY_NAME) if fn is not None else None
        self._displays: Dict[str, Display] = {}
        self._lock = threading.Lock()

    @property
    def data(self) -> Any:
        """The data this view displays"""
        return self._data

    @property
    def has_default(self) -> bool:
        """Whether calling the view renders anything"""
        return self._default is not None

    def __call__(self) -> str:
        """Render the default display"""
        if self._default is None:
            logger.debug(
                "Default display requested on a view without one",
                extra={'data_type': type(self._data).__name__}
            )
            raise MissingDefaultDisplayException(name=DEFAULT_DISPLAY_NAME)

        return self._default()

    def add_display(self, fn: Callable[..., str], this_arg: Any = _UNSET) -> 'View':
        """
        Add a named display, replacing any display with the same name

        Args:
            fn: A named function returning the display output; receives the
                context first, then the arguments given at call time
            this_arg: Context to render against instead of the view's data

        Returns:
            This view, for chaining
        """
        name = self._display_name(fn)
        context = self._data if this_arg is _UNSET else this_arg

        with self._lock:
            replaced = name in self._displays
            self._displays[name] = Display(fn, context, name)

        if replaced:
            logger.debug(f"Replaced display '{name}'", extra={'display': name})
        else:
            logger.debug(f"Added display '{name}'", extra={'display': name})

        return self

    addDisplay = add_display

    def call(self, name: Optional[str] = None, /, *args, **kwargs) -> str:
        """
        Render a display by name, or the default display when name is None

        Example:
            view.call('custom1', 'my content')
        """
        if name is None:
            if args or kwargs:
                raise TypeError("The default display takes no arguments")
            return self()

        return self.get_display(name)(*args, **kwargs)

    def get_display(self, name: str) -> Display:
        """Get the display record registered under a name"""
        display = self._displays.get(name)
        if display is None:
            raise UnknownDisplayException(name=name)
        return display

    def displays(self) -> List[str]:
        """Names of all registered displays"""
        return sorted(self._names())

    def __getattr__(self, name: str) -> Display:
        # Only reached when normal lookup fails; private names never dispatch
        if name.startswith('_'):
            raise AttributeError(name)

        displays = self.__dict__.get('_displays', {})
        display = displays.get(name)
        if display is None:
            raise UnknownDisplayException(name=name)
        return display

    def __contains__(self, name: str) -> bool:
        return name in self._displays

    def __dir__(self):
        return sorted(set(super().__dir__()) | set(self._names()))

    def __repr__(self):
        names = ', '.join(self.displays())
        default = 'default' if self.has_default else 'no default'
        return f'<View of {type(self._data).__name__} ({default}; displays: {names or "none"})>'

    def _names(self) -> List[str]:
        with self._lock:
            return list(self._displays)

    @staticmethod
    def _display_name(fn: Callable[..., str]) -> str:
        """
        Validate a renderer and return the name it registers under

        Raises:
            InvalidRendererException: If fn is unusable as a named display
        """
        name = getattr(fn, '__name__', None)

        if not callable(fn):
            raise InvalidRendererException(
                f"Display must be callable, got {type(fn).__name__}",
                name=name if isinstance(name, str) else None
            )

        if not isinstance(name, str) or not name or name == '<lambda>':
            raise InvalidRendererException(
                "Display must be a named function; use @display('name') for lambdas"
            )

        if name.startswith('_'):
            raise InvalidRendererException(
                f"Display name '{name}' must not start with an underscore",
                name=name
            )

        if hasattr(View, name):
            raise InvalidRendererException(
                f"Display name '{name}' collides with a View member",
                name=name
            )

        strict = Config.get_bool('view.STRICT_NAMES', DEFAULT_STRICT_NAMES)
        if strict and (not name.isidentifier() or keyword.iskeyword(name)):
            raise InvalidRendererException(
                f"Display name '{name}' is not a valid identifier",
                name=name
            )

        return name
