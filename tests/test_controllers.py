"""
Tests for the controller base: action naming, view resolution, the other
result kinds and URL dispatch.
"""
import logging

import pytest
from django.core.exceptions import ImproperlyConfigured
from django.template import TemplateDoesNotExist

from core.controllers import Controller, action
from core.results import (
    ActionResult,
    NotFoundResult,
    RedirectToActionResult,
    ViewResult,
)
from home.controllers import HomeController


class WidgetsController(Controller):
    """Controller used only by these tests."""

    greeting = 'hello'

    @action
    def list_all(self):
        return self.view()

    @action(name='Show')
    def detail(self, pk):
        if pk > 100:
            return self.not_found('No such widget')
        return self.view(view_data={'pk': pk, 'greeting': self.greeting})

    @action(methods=('get', 'post'))
    def legacy(self):
        return self.redirect_to_action('Contact', controller_name='Home')

    @action
    def explicit(self):
        return self.view('Summary', status=202)

    @action
    def broken(self):
        return None

    def helper(self):
        return 'not an action'


class TestActionNaming:
    """Test how actions and controllers are named."""

    def test_action_name_is_camel_cased_method_name(self):
        assert WidgetsController.list_all.action_name == 'ListAll'

    def test_explicit_action_name(self):
        assert WidgetsController.detail.action_name == 'Show'

    def test_get_actions_skips_plain_methods(self):
        actions = WidgetsController.get_actions()

        assert actions == {
            'Broken': 'broken',
            'Explicit': 'explicit',
            'Legacy': 'legacy',
            'ListAll': 'list_all',
            'Show': 'detail',
        }

    def test_controller_name_strips_suffix(self):
        assert WidgetsController.get_controller_name() == 'Widgets'

    def test_controller_name_override(self):
        class Pages(Controller):
            controller_name = 'Static'

        assert Pages.get_controller_name() == 'Static'

    def test_action_name_only_set_while_running(self):
        controller = WidgetsController()

        assert controller.action_name is None
        controller.list_all()
        assert controller.action_name is None


class TestView:
    """Test ViewResult construction."""

    def test_view_name_defaults_to_action(self):
        result = WidgetsController().list_all()

        assert isinstance(result, ViewResult)
        assert isinstance(result, ActionResult)
        assert result.view_name == 'ListAll'
        assert result.template_name == 'widgets/listall.html'

    def test_explicit_view_name_and_status(self):
        result = WidgetsController().explicit()

        assert result.view_name == 'Summary'
        assert result.template_name == 'widgets/summary.html'
        assert result.status_code == 202

    def test_view_data_is_template_context(self):
        result = WidgetsController().detail(7)

        assert result.view_data == {'pk': 7, 'greeting': 'hello'}
        assert result.context_data is result.view_data

    def test_view_outside_action_requires_name(self):
        with pytest.raises(ImproperlyConfigured):
            WidgetsController().view()

    def test_empty_view_name_is_not_replaced_by_action_name(self):
        controller = WidgetsController()
        controller.action_name = 'ListAll'

        with pytest.raises(ImproperlyConfigured):
            controller.view('')

    def test_missing_template_fails_on_render(self):
        result = WidgetsController().list_all()

        with pytest.raises(TemplateDoesNotExist):
            result.render()

    def test_view_outside_action_with_name(self):
        result = WidgetsController().view('Index')

        assert result.view_name == 'Index'

    def test_request_is_carried_on_result(self, rf):
        request = rf.get('/widgets/')

        result = WidgetsController(request=request).list_all()

        assert result._request is request

    def test_repr(self):
        assert repr(WidgetsController().list_all()) == (
            "<ViewResult view_name='ListAll' template_name='widgets/listall.html'>"
        )


class TestOtherResults:
    """Test redirect and not-found results."""

    def test_redirect_to_action(self):
        result = WidgetsController().legacy()

        assert isinstance(result, RedirectToActionResult)
        assert result.kind == 'redirect'
        assert result.status_code == 302
        assert result.url == '/contact/'
        assert result.action_name == 'Contact'
        assert result.controller_name == 'Home'

    def test_redirect_defaults_to_own_controller(self):
        result = HomeController().redirect_to_action('About')

        assert result.controller_name == 'Home'
        assert result.url == '/about/'

    def test_not_found(self):
        result = WidgetsController().detail(500)

        assert isinstance(result, NotFoundResult)
        assert result.kind == 'not_found'
        assert result.status_code == 404
        assert result.content == b'No such widget'


class TestAsView:
    """Test dispatching requests to actions."""

    def test_unknown_action(self):
        with pytest.raises(ImproperlyConfigured, match="no action named 'Delete'"):
            WidgetsController.as_view('Delete')

    def test_plain_method_is_not_routable(self):
        with pytest.raises(ImproperlyConfigured):
            WidgetsController.as_view('helper')

    def test_lowercase_action_name_is_accepted(self):
        view = WidgetsController.as_view('list_all')

        assert view.action_name == 'ListAll'
        assert view.controller_class is WidgetsController

    def test_invalid_initkwarg(self):
        with pytest.raises(ImproperlyConfigured, match="invalid keyword 'colour'"):
            WidgetsController.as_view('Show', colour='red')

    def test_request_initkwarg_is_rejected(self):
        with pytest.raises(ImproperlyConfigured):
            WidgetsController.as_view('Show', request=None)

    def test_dispatch_passes_url_kwargs_and_initkwargs(self, rf):
        view = WidgetsController.as_view('Show', greeting='hi')
        request = rf.get('/widgets/7/')

        result = view(request, pk=7)

        assert result.view_name == 'Show'
        assert result.view_data == {'pk': 7, 'greeting': 'hi'}
        assert result._request is request

    def test_dispatch_builds_fresh_controller_per_request(self, rf):
        view = WidgetsController.as_view('Show', greeting='hi')

        view(rf.get('/widgets/1/'), pk=1)
        result = view(rf.get('/widgets/2/'), pk=2)

        assert result.view_data['pk'] == 2
        assert WidgetsController.greeting == 'hello'

    def test_action_returning_none(self, rf):
        view = WidgetsController.as_view('Broken')

        with pytest.raises(ImproperlyConfigured, match="didn't return a result"):
            view(rf.get('/widgets/broken/'))

    def test_actions_default_to_get_and_head(self):
        assert WidgetsController.as_view('ListAll').http_methods == ('GET', 'HEAD')

    def test_disallowed_method(self, rf):
        view = WidgetsController.as_view('ListAll')

        response = view(rf.delete('/widgets/'))

        assert response.status_code == 405
        assert response['Allow'] == 'GET, HEAD'

    def test_declared_methods_are_dispatched(self, rf):
        view = WidgetsController.as_view('Legacy')

        assert view(rf.post('/widgets/legacy/')).status_code == 302
        assert view(rf.put('/widgets/legacy/')).status_code == 405

    def test_dispatch_is_logged(self, rf, caplog):
        view = WidgetsController.as_view('ListAll')

        with caplog.at_level(logging.DEBUG, logger='core.controllers'):
            view(rf.get('/widgets/'))

        assert 'Dispatching GET /widgets/ to WidgetsController.list_all' in caplog.text
