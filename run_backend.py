#!/usr/bin/env python3
"""Start the Builder Generator API server."""

import uvicorn

from buildergen.core.config import load_config
from buildergen.utils.logger import setup_logging

if __name__ == "__main__":
    config = load_config()
    setup_logging(
        level=config.logging.level,
        format_string=config.logging.format,
        log_file=config.logging.file,
    )
    uvicorn.run(
        "buildergen.api.main:app",
        host=config.api.host,
        port=config.api.port,
        reload=True,
        reload_dirs=["buildergen"],
    )
