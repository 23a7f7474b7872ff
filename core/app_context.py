from dataclasses import dataclass
from typing import Callable, Optional

from sqlalchemy.orm import Session

from core.config_loader import AppConfig
from core.ranking import RankingService
from core.recompute import ChangeFeedAdapter, RecomputeService
from core.scorer import ScoringService
from core.sync import MatchStoreSynchronizer
from database.database import get_session_factory


@dataclass
class AppContext:
    """Application context container that holds all wired dependencies.

    This eliminates duplicate wiring code and provides a single source
    of truth for service instantiation. DB access is obtained via
    match_uow() inside each service call, using session_factory.
    """
    config: AppConfig
    scorer: ScoringService
    synchronizer: MatchStoreSynchronizer
    recompute_service: RecomputeService
    ranking_service: RankingService
    change_feed: ChangeFeedAdapter

    @classmethod
    def build(
        cls,
        config: AppConfig,
        session_factory: Optional[Callable[[], Session]] = None
    ) -> "AppContext":
        """Build an AppContext from config.

        Args:
            config: Loaded application configuration
            session_factory: Session factory override (tests pass an
                in-memory one); defaults to one bound to config.database.url

        Returns:
            Fully wired AppContext instance
        """
        session_factory = session_factory or get_session_factory(config.database.url)

        scorer = ScoringService(config.scorer)
        synchronizer = MatchStoreSynchronizer(config.sync, session_factory=session_factory)
        recompute_service = RecomputeService(
            scorer=scorer,
            synchronizer=synchronizer,
            config=config.recompute,
            session_factory=session_factory,
        )
        ranking_service = RankingService(
            config=config.ranking,
            scorer=scorer,
            session_factory=session_factory,
        )

        return cls(
            config=config,
            scorer=scorer,
            synchronizer=synchronizer,
            recompute_service=recompute_service,
            ranking_service=ranking_service,
            change_feed=ChangeFeedAdapter(recompute_service),
        )
