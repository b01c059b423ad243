"""
Django project configuration for the Restful Booker API.
"""
