from contextlib import asynccontextmanager
import logging

from resume_analyzer.core.config.scoring import get_scoring_config, scoring_config_path
from resume_analyzer.taxonomy import get_default_taxonomy_provider

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app):
    config = get_scoring_config()
    taxonomy = get_default_taxonomy_provider()
    logger.info(
        "scoring_config_loaded path=%s sections=%s skills=%s",
        scoring_config_path(),
        ",".join(sorted(config)),
        len(taxonomy.skill_terms()),
    )
    yield
