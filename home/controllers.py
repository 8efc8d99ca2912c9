"""
Home Controller

Actions for the public pages. Each action returns a ViewResult named after
the action, rendered from home/<action>.html.
"""
from core.controllers import Controller, action


class HomeController(Controller):
    """
    Landing, about and contact pages.

    GET /          -> Index
    GET /about/    -> About
    GET /contact/  -> Contact
    """

    @action
    def index(self):
        """Landing page."""
        return self.view()

    @action
    def about(self):
        """Application description page."""
        return self.view(view_data={'message': 'Your application description page.'})

    @action
    def contact(self):
        """Contact page. Static content, no view data."""
        return self.view()
