from bowling_league.routers.api_test import router as api_test_router
from bowling_league.routers.bowlers import router as bowlers_router
from bowling_league.routers.health import router as health_router

__all__ = ["health_router", "api_test_router", "bowlers_router"]
