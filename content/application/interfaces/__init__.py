"""Application ports (Protocols) implemented by infrastructure."""

from content.application.interfaces.repositories import IContentRichEntityRepository
from content.application.interfaces.services import (
    ICacheLifetimeResolver,
    IStructureMetadataProvider,
)

__all__ = [
    "ICacheLifetimeResolver",
    "IContentRichEntityRepository",
    "IStructureMetadataProvider",
]
