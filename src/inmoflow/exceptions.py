"""
Excepciones del dominio.
"""

from typing import Optional


class InmoflowError(Exception):
    """Error base de la aplicación."""


class NotFoundError(InmoflowError):
    """La entidad pedida no existe en el store."""

    def __init__(self, entity: str, entity_id: str):
        self.entity = entity
        self.entity_id = entity_id
        super().__init__(f"{entity} not found: {entity_id}")


class AiOperationError(InmoflowError):
    """Fallo de una operación del driver de IA (remoto o simulado)."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        self.status_code = status_code
        super().__init__(message)


class InvalidTransitionError(InmoflowError):
    """Cambio de estado no permitido en el ciclo de vida de una propiedad."""

    def __init__(self, current: str, target: str):
        self.current = current
        self.target = target
        super().__init__(f"Invalid status transition: {current} -> {target}")
