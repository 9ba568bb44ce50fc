"""Infrastructure layer: persistence, template structure metadata.

Implements the application ports (IContentRichEntityRepository,
IStructureMetadataProvider).
"""
