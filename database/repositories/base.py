from sqlalchemy.orm import Session


class BaseRepository:
    """Shared session plumbing for the talent, startup and match repositories.

    Transactions belong to the unit of work; repositories only flush.
    """

    def __init__(self, db: Session):
        self.db = db

    def flush(self) -> None:
        self.db.flush()
