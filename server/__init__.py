"""HTTP adapter for the lift dispatch service"""

from .http_server import create_app, build_services, run_server

__all__ = [
    'create_app',
    'build_services',
    'run_server',
]
