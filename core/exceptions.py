# core/exceptions.py
"""
Excepciones propias del generador.
Cada una transporta un mensaje legible y un dict de detalles para el log.
"""
from typing import Dict, Any, Optional


class GalaxyForgeException(Exception):
    """Base de todos los errores del generador."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if not self.details:
            return self.message
        extra = ", ".join(f"{k}={v!r}" for k, v in self.details.items())
        return f"{self.message} ({extra})"


class EntityConstructionError(GalaxyForgeException):
    """Una fábrica no pudo derivar la entidad. Nunca sale de la fábrica: se convierte en Failed."""
    pass


class GenerationSetupError(GalaxyForgeException):
    """El pipeline no puede arrancar: faltan servicios u opciones válidas."""

    @property
    def report_message(self) -> str:
        """Texto para el último reporte de progreso."""
        return f"Error: {self.message}"


class ProjectionError(GalaxyForgeException):
    """Una entidad no puede proyectarse al grafo; se omite."""
    pass
