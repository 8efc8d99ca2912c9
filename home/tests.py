"""
Tests for the Home controller and its pages.
"""
import pytest

from core.results import ViewResult
from home.controllers import HomeController


class TestHomeControllerContact:
    """Test the Contact action called directly."""

    def test_contact(self):
        """Contact returns a view result."""
        controller = HomeController()

        result = controller.contact()

        assert result is not None
        assert isinstance(result, ViewResult)

    def test_contact_view_name_defaults_to_action_name(self, home_controller):
        result = home_controller.contact()

        assert result.kind == 'view'
        assert result.view_name == 'Contact'
        assert result.template_name == 'home/contact.html'

    def test_contact_has_no_view_data(self, home_controller):
        assert home_controller.contact().view_data is None

    def test_repeated_calls_return_independent_results(self, home_controller):
        """Each call builds a fresh result; nothing carries over between calls."""
        first = home_controller.contact()
        second = home_controller.contact()

        assert first is not second
        assert isinstance(second, ViewResult)
        assert second.view_name == first.view_name == 'Contact'
        assert home_controller.action_name is None

    def test_contact_without_request_renders(self, home_controller):
        result = home_controller.contact()

        result.render()

        assert result.status_code == 200
        assert b'<h2>Contact</h2>' in result.content


class TestHomeControllerOtherActions:
    """Test the Index and About actions."""

    def test_index(self, home_controller):
        result = home_controller.index()

        assert isinstance(result, ViewResult)
        assert result.view_name == 'Index'
        assert result.view_data is None

    def test_about_passes_message(self, home_controller):
        result = home_controller.about()

        assert result.view_name == 'About'
        assert result.view_data == {'message': 'Your application description page.'}

    def test_actions_are_registered(self):
        assert HomeController.get_actions() == {
            'About': 'about',
            'Contact': 'contact',
            'Index': 'index',
        }


class TestHomePages:
    """Test the pages through the URL dispatcher."""

    @pytest.mark.parametrize('url, template, heading', [
        ('/', 'home/index.html', b'Welcome.'),
        ('/about/', 'home/about.html', b'Your application description page.'),
        ('/contact/', 'home/contact.html', b'<h2>Contact</h2>'),
    ])
    def test_page_renders(self, client, url, template, heading):
        response = client.get(url)

        assert response.status_code == 200
        assert isinstance(response, ViewResult)
        assert template in [t.name for t in response.templates]
        assert heading in response.content

    def test_contact_page_uses_site_name(self, client, settings):
        settings.SITE_NAME = 'Test Site'

        response = client.get('/contact/')

        assert b'Get in touch with the Test Site team.' in response.content
        assert response.context['site_name'] == 'Test Site'

    def test_contact_page_request_is_passed_to_controller(self, client):
        response = client.get('/contact/')

        assert response.view_name == 'Contact'
        assert response.view_data is None

    @pytest.mark.parametrize('method', ['post', 'put', 'patch', 'delete'])
    def test_pages_only_answer_get_and_head(self, client, method):
        response = getattr(client, method)('/contact/')

        assert response.status_code == 405
        assert response['Allow'] == 'GET, HEAD'

    def test_head_is_allowed(self, client):
        response = client.head('/contact/')

        assert response.status_code == 200

    def test_missing_trailing_slash_redirects(self, client):
        response = client.get('/contact')

        assert response.status_code == 301
        assert response['Location'] == '/contact/'
