"""
FastAPI dependency injection for catalog configuration and client.
"""

import logging
from typing import Generator

import requests
from fastapi import Depends

from app.api.config import load_catalog_config
from app.core.catalog.config import CatalogConfig, mask_secret
from app.core.catalog.client import MovieCatalogClient

logger = logging.getLogger(__name__)


def get_catalog_config() -> CatalogConfig:
    """Resolve catalog credentials per request; raises ConfigurationError if missing."""
    config = load_catalog_config()
    logger.debug("Catalog config resolved (host=%s, key=%s)", config.api_host, mask_secret(config.api_key))
    return config


def get_http_session() -> Generator[requests.Session, None, None]:
    """Yield an outbound HTTP session for FastAPI Depends()."""
    session = requests.Session()
    try:
        yield session
    finally:
        session.close()


def get_catalog_client(
    config: CatalogConfig = Depends(get_catalog_config),
    session: requests.Session = Depends(get_http_session),
) -> MovieCatalogClient:
    """Build a catalog client bound to the resolved config."""
    return MovieCatalogClient(config, session=session)
