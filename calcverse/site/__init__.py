from calcverse.site.loader import load_site_config
from calcverse.site.models import SiteConfig

__all__ = ["SiteConfig", "load_site_config"]
