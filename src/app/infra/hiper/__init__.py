"""Implementações concretas de IO para o Hiper."""

from .order_forwarder import HiperOrderForwarder

__all__ = ["HiperOrderForwarder"]
