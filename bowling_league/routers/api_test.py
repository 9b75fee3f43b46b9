"""
Endpoint diagnostico dello store (ex TestController).
Connessione diretta, conteggi e tabelle; nessun contratto di business.
"""

import logging

from fastapi import APIRouter, Depends

from bowling_league.core.config import get_database_url
from bowling_league.routers.bowlers import FEATURED_TEAM_NAMES
from bowling_league.services.store_probe import StoreHealthProbe

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["diagnostics"])


def get_store_probe() -> StoreHealthProbe:
    return StoreHealthProbe(get_database_url(), FEATURED_TEAM_NAMES)


@router.get("/test")
def api_test(probe: StoreHealthProbe = Depends(get_store_probe)):
    """
    Stato dello store: connection string (password mascherata), file, tabelle, conteggi.
    Sempre 200; in caso di errore il dict parziale contiene "error".
    """
    result = probe.run()
    if "error" in result:
        logger.warning("api_test: probe con errore: %s", result["error"])
    return result
