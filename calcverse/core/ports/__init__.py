from calcverse.core.ports.site import (
    LayoutPort,
    LayoutProps,
    MetadataPort,
    PageMeta,
    RelatedLink,
)

__all__ = [
    "LayoutPort",
    "LayoutProps",
    "MetadataPort",
    "PageMeta",
    "RelatedLink",
]
