"""
Project configuration and the controller layer shared by all apps:
- results: ActionResult types returned by actions
- controllers: Controller base class, @action and URL dispatch
"""
