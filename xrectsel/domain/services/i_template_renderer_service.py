# xrectsel/domain/services/i_template_renderer_service.py
from abc import ABC, abstractmethod

from xrectsel.domain.common.result import Result
from xrectsel.domain.models.region_model import Region


class ITemplateRendererService(ABC):
    """Service for formatting a region through a ``%``-directive template."""

    @abstractmethod
    def render(self, fmt: str, region: Region) -> Result[str]:
        """Render ``fmt`` with the fields of ``region``."""
        pass

    @abstractmethod
    def validate(self, fmt: str) -> Result[bool]:
        """Check ``fmt`` for syntax errors without a region to render."""
        pass
