"""
API package containing the HTTP routes.

``router`` bundles the JSON endpoints mounted under ``/api``; the
``pages`` endpoints are mounted at the site root.
"""
