"""
Home App

Public pages of the site:
- Index (landing page)
- About
- Contact
"""
