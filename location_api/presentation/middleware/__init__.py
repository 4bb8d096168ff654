"""Presentation Middleware"""
from .error_handler import OperationMessages, error_response, status_for
from .logging import bind_invocation_context

__all__ = [
    "OperationMessages",
    "bind_invocation_context",
    "error_response",
    "status_for",
]
