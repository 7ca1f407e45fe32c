"""
Generación de textos de marketing (anuncios, e-mails, reels).
"""

from inmoflow.marketing.copywriter import Copywriter, REEL_HOOKS

__all__ = [
    "Copywriter",
    "REEL_HOOKS",
]
