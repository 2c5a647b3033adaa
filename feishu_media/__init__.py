"""Feishu / Lark media tools for chat agents."""

__version__ = "0.3.0"
