from typing import Annotated

from fastapi import Depends

from mpags_cipher.core.config import Settings, get_settings
from mpags_cipher.services.pipeline.applier import ChunkedApplier


# Settings dependency
SettingsDep = Annotated[Settings, Depends(get_settings)]


# Applier dependency
def get_applier(settings: SettingsDep) -> ChunkedApplier:
    """Get an applier configured from settings."""
    return ChunkedApplier(
        workers=settings.worker_count,
        timeout=settings.worker_timeout_seconds,
    )

ApplierDep = Annotated[ChunkedApplier, Depends(get_applier)]
