"""Reusable patterns shared by the bookstore core.

Each module is self-contained: a pure-function rules engine for
validation and dataclass-based domain configuration.
"""
