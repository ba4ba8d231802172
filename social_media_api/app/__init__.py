"""
Application package initializer.

This package contains the main entrypoint for the API and its
submodules: ``core`` (configuration, logging, security, errors and the
in-memory stores), ``schemas``, ``services`` and ``api``.
"""
