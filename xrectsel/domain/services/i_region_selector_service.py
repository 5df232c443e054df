# xrectsel/domain/services/i_region_selector_service.py
from abc import ABC, abstractmethod
from typing import Any

from xrectsel.domain.common.result import Result
from xrectsel.domain.models.region_model import Region
from xrectsel.domain.services.i_display_service import IDisplayService


class IRegionSelectorService(ABC):
    """Service for letting the user drag out a screen region."""

    @abstractmethod
    def select(self, display: IDisplayService, root: Any) -> Result[Region]:
        """Run the interactive selection on ``root`` until a button is released."""
        pass
