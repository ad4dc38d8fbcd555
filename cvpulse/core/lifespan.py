from contextlib import asynccontextmanager
import logging

from cvpulse.analysis.generator import select_generator
from cvpulse.core.config import settings
from cvpulse.services.session import session_store

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app):
    # chosen once per process; a failed remote call never switches to mock
    app.state.generator = select_generator(settings)
    app.state.sessions = session_store
    if app.state.generator.mode == "mock":
        logger.warning("running_in_demo_mode: no AI credential configured, serving mock analysis")
    yield
    session_store.clear()
