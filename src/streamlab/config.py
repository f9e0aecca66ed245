"""
Runtime settings for streamlab.

Settings come from the environment:
    LOG_LEVEL                   log level for the streamlab logger
    STREAMLAB_PARALLEL_WORKERS  thread count for parallel streams
                                (unset = executor default)
"""

import os
from typing import Optional

from pydantic import BaseModel, Field


class Settings(BaseModel):
    log_level: str = "INFO"
    parallel_workers: Optional[int] = Field(default=None, ge=1)

    @classmethod
    def load(cls) -> "Settings":
        workers = os.getenv("STREAMLAB_PARALLEL_WORKERS")
        return cls(
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            parallel_workers=workers or None,
        )


settings = Settings.load()
