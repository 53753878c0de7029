"""Site rendering helpers: render context and content localization."""

from modules.site.content import LOCALIZED_FIELDS, localize_record
from modules.site.context import RenderContext

__all__ = ["LOCALIZED_FIELDS", "RenderContext", "localize_record"]
