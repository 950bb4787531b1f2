"""Interfaces/abstracciones del Core.

Define los contratos (Protocol) que implementan los adaptadores concretos:
el generador remoto y el portapapeles.
"""

from core.interfaces.clipboard import Clipboard
from core.interfaces.generator import OrderGenerator

__all__ = ["Clipboard", "OrderGenerator"]
