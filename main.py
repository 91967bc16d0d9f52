"""Cloud Functions source module.

Deploy with ``--entry-point=GoogleChatAlert``.
"""

import logging

from app.config import get_settings
from app.function import ENTRY_POINT, register

logging.basicConfig(
    level=get_settings().log_level.upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)

GoogleChatAlert = register(ENTRY_POINT)
