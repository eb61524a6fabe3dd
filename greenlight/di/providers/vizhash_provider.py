from typing import TYPE_CHECKING
from ...core.config import Settings
from ...vizhash.service import VizHashService

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class VizHashProvider:
    """Registers the shared VizHash service"""
    
    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register VizHashService as a singleton so font and stand-in photos are
        read once per process. Fails fast on a missing or corrupt font.
        """
        if container.is_registered(VizHashService):
            return
        settings = container.get(Settings)
        container.register_singleton(VizHashService, VizHashService(settings.vizhash_config()))
