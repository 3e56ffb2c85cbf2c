"""MVC Portfolio: a portfolio and blog service built on FastAPI."""

__version__ = "1.0.0"
