"""
FastAPI integration.

Renders outcomes onto Starlette responses and hooks the core into the
request pipeline, either app-wide or per endpoint.
"""
