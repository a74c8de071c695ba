"""
Routes package for the task API.

This package contains route blueprints:
- api: REST endpoints for the /tasks resource and the health check
"""
