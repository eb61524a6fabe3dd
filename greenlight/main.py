# Standard library imports
from pathlib import Path
import logging

# External package imports
from dotenv import load_dotenv

# Local application imports
from .core.config import get_settings, reset_settings
from .di.container import DIContainer, set_container

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def create_application() -> DIContainer:
    """
    Create and configure the permit backend.
    
    This function sets up the application with:
    - Environment variable loading
    - Logging configuration
    - Dependency registration (repositories, VizHash assets, use cases)
    
    Returns:
        Configured DIContainer, also installed as the global container
    """
    # Load environment variables from .env file
    env_path = Path(__file__).resolve().parent.parent / ".env"
    load_dotenv(env_path)
    reset_settings()
    settings = get_settings()
    
    logging.basicConfig(level=settings.log_level, format=LOG_FORMAT)
    
    container = DIContainer(settings)
    set_container(container)
    
    if not settings.app_secret:
        logger.warning("APP_SECRET is not set; permit images cannot be rendered until it is configured")
    logger.info(f"Permit backend ready (storage={settings.storage_backend})")
    return container
