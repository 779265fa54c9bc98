"""
HTTP application exposing the text editor tool.
"""

import logging

from fastapi import FastAPI

from text_editor import __version__
from text_editor.api.routers import router as api_router
from text_editor.config.settings import get_settings

# Create FastAPI app
app = FastAPI(title="Text Editor Tool API", version=__version__)
app.include_router(api_router)

# Configure logging
logging.basicConfig(
    level=get_settings().log_level,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)

# Get logger for this module
logger = logging.getLogger(__name__)
logger.info(f"Text editor API v{__version__} ready")
