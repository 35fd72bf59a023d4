"""
Couche services (cas d'utilisation).

Les services orchestrent la logique du domaine :
- naming : Chemins canoniques des liens (fonctions pures)
- resolver : Resolution titre -> ProviderRecord avec cache et repli
- materializer : Creation idempotente des liens symboliques
- orchestrator : Traitement sequentiel d'un lot avec rate limiting
- name_fixer : Correction des noms contenant des deux-points
"""

from medialinker.services.context import RunContext
from medialinker.services.materializer import LinkMaterializer, LinkResult, LinkStatus
from medialinker.services.name_fixer import NameFixer, RenameReport
from medialinker.services.orchestrator import (
    BatchOrchestrator,
    BatchReport,
    SourceUnreadableError,
)
from medialinker.services.resolver import MetadataResolver

__all__ = [
    "RunContext",
    "MetadataResolver",
    "LinkMaterializer",
    "LinkResult",
    "LinkStatus",
    "BatchOrchestrator",
    "BatchReport",
    "SourceUnreadableError",
    "NameFixer",
    "RenameReport",
]
