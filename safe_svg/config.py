"""
Configuration safe_svg — lue depuis l'environnement.

  SAFE_SVG_MEDIA_ROOT    répertoire des médias (LocalMediaLibrary)
  SAFE_SVG_INLINE_CLASS  classe de base du wrapper, avant les hooks
  SAFE_SVG_LOG_LEVEL     niveau de log pour configure_logging()
"""
import logging
import os

from pydantic import BaseModel, Field

LOG_FORMAT = "%(asctime)s %(levelname)s — %(message)s"


class Settings(BaseModel):
    media_root: str = Field(default="./media")
    inline_class: str = Field(default="safe-svg-inline")
    log_level: str = Field(default="INFO")


def get_settings() -> Settings:
    """Construit les Settings depuis les variables d'environnement courantes."""
    return Settings(
        media_root=os.getenv("SAFE_SVG_MEDIA_ROOT", "./media"),
        inline_class=os.getenv("SAFE_SVG_INLINE_CLASS", "safe-svg-inline"),
        log_level=os.getenv("SAFE_SVG_LOG_LEVEL", "INFO").upper(),
    )


def configure_logging(settings: Settings | None = None) -> None:
    """basicConfig au format de l'hôte. À appeler côté application, jamais dans la lib."""
    settings = settings or get_settings()
    logging.basicConfig(level=getattr(logging, settings.log_level, logging.INFO), format=LOG_FORMAT)
