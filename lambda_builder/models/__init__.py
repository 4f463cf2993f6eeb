"""Models for Lambda Builder."""

from .config import BuildConfig, InvocationOptions, ProjectOverride

__all__ = [
    'BuildConfig',
    'InvocationOptions',
    'ProjectOverride',
]
