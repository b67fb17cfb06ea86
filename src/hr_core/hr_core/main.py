from __future__ import annotations

import importlib
import logging

from dotenv import load_dotenv

from config import get_settings_module

from .container import Container, build_container
from .logging_utils import setup_logging

logger = logging.getLogger(__name__)


def create_app() -> Container:
    load_dotenv(override=False)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)

    setup_logging(
        level=str(getattr(settings, "LOG_LEVEL", "INFO")),
        json_output=bool(getattr(settings, "LOG_JSON", False)),
    )

    container = build_container(settings=settings)

    # Helpful startup info so it is obvious which storage is being read.
    logger.info(
        "hr-core started",
        extra={
            "settings": settings_module,
            "storage_backend": type(container.backend).__name__,
            "advisory_enabled": container.advisory_client.enabled,
            "restored_session": container.store.session.employee_id if container.store.session else None,
        },
    )
    return container
