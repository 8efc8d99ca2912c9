"""
Action Results

Values returned by controller actions. An action never builds the final
response body itself; it returns a result describing what should happen:

- ViewResult: render a named view (template) with optional view data
- RedirectToActionResult: send the client to another action
- NotFoundResult: the requested thing does not exist

Every result is also a Django response, so the URL dispatcher can return it
as-is. ViewResult is rendered lazily, when Django (or a test) calls render().
"""
from django.http import HttpResponseNotFound, HttpResponseRedirect
from django.template.response import TemplateResponse
from django.urls import reverse


class ActionResult:
    """Marker for everything a controller action may return."""

    kind = None


class ViewResult(ActionResult, TemplateResponse):
    """
    Render the named view.

    `view_name` is the logical name ("Contact"); `template_name` is the
    template it resolves to ("home/contact.html"). `view_data` is handed to
    the template as its context and stays None when the action passes none.
    """

    kind = 'view'

    def __init__(self, view_name, template_name, view_data=None, request=None, status=None):
        self.view_name = view_name
        super().__init__(request, template_name, context=view_data, status=status)

    @property
    def view_data(self):
        return self.context_data

    def __repr__(self):
        return '<%s view_name=%r template_name=%r>' % (
            self.__class__.__name__,
            self.view_name,
            self.template_name,
        )


class RedirectToActionResult(ActionResult, HttpResponseRedirect):
    """Redirect to the URL named '<controller>:<action>'."""

    kind = 'redirect'

    def __init__(self, action_name, controller_name):
        self.action_name = action_name
        self.controller_name = controller_name
        super().__init__(reverse(f'{controller_name.lower()}:{action_name.lower()}'))


class NotFoundResult(ActionResult, HttpResponseNotFound):
    kind = 'not_found'
