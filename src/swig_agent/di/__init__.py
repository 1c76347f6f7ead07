"""Dependency injection."""

from swig_agent.di.container import DIContainer, load_swig_program

__all__ = ["DIContainer", "load_swig_program"]
