from contextlib import asynccontextmanager
import logging

from resume_optimizer.core.config.scoring import get_scoring_config
from resume_optimizer.taxonomy import get_default_vocabulary

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app):
    scoring = get_scoring_config()
    vocabulary = get_default_vocabulary()
    logger.info(
        "resume_optimizer_ready scoring_sections=%s vocabulary_skills=%s stop_words=%s",
        sorted(scoring),
        len(vocabulary.skills),
        len(vocabulary.stop_words),
    )
    yield
