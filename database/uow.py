import contextlib
import logging
from typing import Callable, Iterator, Optional

from sqlalchemy.exc import InterfaceError, OperationalError
from sqlalchemy.orm import Session

from core.errors import StoreUnavailable
from database.database import SessionLocal
from database.repository import MatchEngineRepository

logger = logging.getLogger(__name__)

# Errors raised when the store cannot be reached (lost connection, refused, timeout)
STORE_UNAVAILABLE_ERRORS = (OperationalError, InterfaceError)


@contextlib.contextmanager
def match_uow(session_factory: Optional[Callable[[], Session]] = None) -> Iterator[MatchEngineRepository]:
    """Per-unit-of-work transaction scope.

    Yields a MatchEngineRepository bound to a fresh Session. Commits on success,
    rolls back on exception, always closes. Connectivity failures surface as
    StoreUnavailable.

    Usage:
        with match_uow() as repo:
            talent = repo.talents.get_talent_profile(talent_id)
            # perform operations...
        # commit happens automatically on successful exit
    """
    session = (session_factory or SessionLocal)()
    try:
        repo = MatchEngineRepository(session)
        yield repo
        session.commit()
    except STORE_UNAVAILABLE_ERRORS as e:
        session.rollback()
        logger.warning(f"Match store unavailable: {e}")
        raise StoreUnavailable(str(e)) from e
    except BaseException:
        session.rollback()
        raise
    finally:
        session.close()
