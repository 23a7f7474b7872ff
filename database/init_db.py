import logging
from typing import Optional

from sqlalchemy import text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import OperationalError
from tenacity import retry, retry_if_exception_type, stop_after_attempt, wait_fixed

from database.database import get_engine, init_schema

logger = logging.getLogger(__name__)


@retry(
    retry=retry_if_exception_type(OperationalError),
    stop=stop_after_attempt(5),
    wait=wait_fixed(2),
    reraise=True
)
def init_db(engine: Optional[Engine] = None) -> None:
    """Create the match engine tables, waiting for the database to come up."""
    engine = engine or get_engine()
    logger.info("Initializing database...")
    try:
        with engine.connect() as connection:
            connection.execute(text("SELECT 1"))

        init_schema(engine)
        logger.info("Tables created or verified.")

    except OperationalError as e:
        logger.error(f"Error initializing DB: {e}")
        raise
