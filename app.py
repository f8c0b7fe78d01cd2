"""
Mini eLearn - Course catalog with locally saved progress.

Streamlit application: browse courses, tick off lessons, mark courses
complete. Progress is stored in ~/.minielearn/progress.db (see
minielearn.config for overrides).

Usage:
    streamlit run app.py
"""

import logging

import streamlit as st

from minielearn.classroom import (
    CatalogError,
    CatalogLoader,
    ProgressStore,
    Router,
    SqliteStorage,
)
from minielearn.config import Settings, configure_logging, load_settings
from minielearn.schemas import Catalog
from minielearn.viewer import ViewDispatcher
from minielearn.viewer.streamlit_views import QueryParamLocation, StreamlitRenderer


logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# Configuration
# -----------------------------------------------------------------------------

st.set_page_config(
    page_title="Mini eLearn",
    page_icon="📚",
    layout="wide",
)


@st.cache_resource
def get_settings() -> Settings:
    settings = load_settings()
    configure_logging(settings.log_level)
    return settings


@st.cache_resource
def get_catalog(catalog_path) -> Catalog:
    return CatalogLoader(catalog_path).load()


@st.cache_resource
def get_store(progress_db, storage_key: str) -> ProgressStore:
    return ProgressStore(SqliteStorage(progress_db), key=storage_key)


# -----------------------------------------------------------------------------
# Main App
# -----------------------------------------------------------------------------

def main():
    """Main application entry point."""
    settings = get_settings()

    try:
        catalog = get_catalog(settings.catalog_path)
    except CatalogError as e:
        logger.error(f"Failed to load catalog: {e}")
        st.error(f"Course catalog could not be loaded: {e}")
        return

    store = get_store(settings.progress_db, settings.storage_key)

    # location, renderer and dispatcher live for one script run (one event)
    renderer = StreamlitRenderer()
    dispatcher = ViewDispatcher(catalog, store, Router(QueryParamLocation()), renderer)
    renderer.bind(dispatcher)
    dispatcher.start()


if __name__ == "__main__":
    main()
