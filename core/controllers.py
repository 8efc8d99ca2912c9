"""
Controller Base

Controllers group related actions. An action is a method marked with
@action that returns an ActionResult. Controllers take the current request
as an explicit constructor argument, so an action can be called directly in
a test without any request at all.

Routing goes through Controller.as_view():

    path('contact/', HomeController.as_view('Contact'), name='contact')

which builds a fresh controller per request and returns the action's result
to Django.
"""
import functools
import logging

from django.core.exceptions import ImproperlyConfigured
from django.http import HttpResponseNotAllowed

from .results import NotFoundResult, RedirectToActionResult, ViewResult

logger = logging.getLogger(__name__)


def _camel_case(method_name):
    return ''.join(part.capitalize() for part in method_name.split('_'))


def action(method=None, *, name=None, methods=('GET', 'HEAD')):
    """
    Mark a controller method as an action.

    The action name is the method name in CamelCase (`contact` -> `Contact`)
    unless `name` is given. While the action runs, `self.action_name` holds
    it so that `self.view()` can default the view name.

    `methods` lists the HTTP methods the dispatcher routes to the action;
    any other method is answered with 405.
    """
    def decorator(func):
        action_name = name or _camel_case(func.__name__)

        @functools.wraps(func)
        def wrapper(self, *args, **kwargs):
            previous = self.action_name
            self.action_name = action_name
            try:
                return func(self, *args, **kwargs)
            finally:
                self.action_name = previous

        wrapper.action_name = action_name
        wrapper.http_methods = tuple(m.upper() for m in methods)
        return wrapper

    if method is not None:
        return decorator(method)
    return decorator


class Controller:
    """Base class for request handlers."""

    # Defaults to the class name without the 'Controller' suffix
    controller_name = None

    def __init__(self, request=None):
        self.request = request
        self.action_name = None

    @classmethod
    def get_controller_name(cls):
        if cls.controller_name:
            return cls.controller_name
        name = cls.__name__
        if name.endswith('Controller') and name != 'Controller':
            name = name[:-len('Controller')]
        return name

    @classmethod
    def get_actions(cls):
        """Map action names to the method names implementing them."""
        actions = {}
        for attr in dir(cls):
            member = getattr(cls, attr, None)
            action_name = getattr(member, 'action_name', None)
            if callable(member) and action_name:
                actions[action_name] = attr
        return actions

    def get_template_name(self, view_name):
        return f'{self.get_controller_name().lower()}/{view_name.lower()}.html'

    def view(self, view_name=None, view_data=None, status=None):
        """Build a ViewResult, naming the view after the running action by default."""
        if view_name is None:
            view_name = self.action_name
        if not view_name:
            raise ImproperlyConfigured(
                f"{self.__class__.__name__}.view() was called outside an action "
                "without a view name."
            )
        return ViewResult(
            view_name,
            self.get_template_name(view_name),
            view_data=view_data,
            request=self.request,
            status=status,
        )

    def redirect_to_action(self, action_name, controller_name=None):
        return RedirectToActionResult(action_name, controller_name or self.get_controller_name())

    def not_found(self, message=''):
        return NotFoundResult(message)

    @classmethod
    def as_view(cls, action_name, **initkwargs):
        """Return a Django view function dispatching to one action."""
        actions = cls.get_actions()
        method_name = actions.get(action_name) or actions.get(_camel_case(action_name))
        if method_name is None:
            raise ImproperlyConfigured(
                f"{cls.__name__} has no action named '{action_name}'. "
                f"Available actions: {', '.join(sorted(actions)) or 'none'}."
            )
        for key in initkwargs:
            if key == 'request' or not hasattr(cls, key):
                raise ImproperlyConfigured(
                    f"as_view() received an invalid keyword '{key}' for {cls.__name__}."
                )
        allowed_methods = getattr(cls, method_name).http_methods

        def view(request, *args, **kwargs):
            if request.method not in allowed_methods:
                logger.warning(
                    "Method Not Allowed (%s): %s",
                    request.method, request.path,
                    extra={'status_code': 405, 'request': request},
                )
                return HttpResponseNotAllowed(allowed_methods)

            controller = cls(request=request)
            for key, value in initkwargs.items():
                setattr(controller, key, value)

            logger.debug(
                "Dispatching %s %s to %s.%s",
                request.method, request.path, cls.__name__, method_name,
            )
            result = getattr(controller, method_name)(*args, **kwargs)
            if result is None:
                raise ImproperlyConfigured(
                    f"{cls.__name__}.{method_name} didn't return a result. "
                    "It returned None instead."
                )
            return result

        view.controller_class = cls
        view.action_name = getattr(cls, method_name).action_name
        view.http_methods = allowed_methods
        view.__name__ = method_name
        view.__qualname__ = f'{cls.__qualname__}.{method_name}'
        view.__doc__ = getattr(cls, method_name).__doc__
        view.__module__ = cls.__module__
        return view
