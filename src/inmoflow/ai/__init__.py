"""
Módulo de IA.

Drivers intercambiables (motor local o servicio HTTP) y el asistente
que los expone por id de lead/propiedad.
"""

from inmoflow.ai.drivers import BaseAiDriver, MockAiDriver, get_ai_driver
from inmoflow.ai.http_driver import HttpAiDriver
from inmoflow.ai.assistant import AiAssistant

__all__ = [
    # Drivers
    "BaseAiDriver",
    "MockAiDriver",
    "HttpAiDriver",
    "get_ai_driver",
    # Fachada
    "AiAssistant",
]
