"""
Demo application built on fastapi_http_exceptions.

Not imported by the package root; import
``fastapi_http_exceptions.demo.main`` to build the app.
"""
