from typing import Optional
from ..config.settings import SocialSettings, settings as default_settings
from ..utils.logger import setup_logger
from .service import SocialService
from .repo import PersonsRepo, GroupsRepo
from .graph import SocialGraph

logger = setup_logger('socialapp.main')

def build_service(settings: Optional[SocialSettings] = None) -> SocialService:
    """Build a ready-to-use social service.

    Initializes all required components:
    - Persons repository
    - Groups repository
    - Social graph (owns the post serial counter)
    - Request/response service

    Args:
        settings (SocialSettings, optional): Configuration. Defaults to the
            environment-driven module settings.

    Returns:
        SocialService: Service over a fresh, empty graph
    """
    settings = settings or default_settings
    graph = SocialGraph(PersonsRepo(), GroupsRepo(), config=settings)
    service = SocialService(graph)
    logger.info(f"Social service ready (first post serial {settings.first_post_serial})")
    return service
