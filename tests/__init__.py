"""
Project-level test suite.

Test Organization:
- test_controllers.py - controller base, action results and URL dispatch
- App-specific tests remain in their respective app directories (e.g., home/tests.py)
"""
