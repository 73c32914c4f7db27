#!/usr/bin/env python3
"""Start the Shell Framer API server."""

import uvicorn

from shellframer.core.logging import setup_logging

if __name__ == "__main__":
    setup_logging("INFO")
    uvicorn.run(
        "shellframer.api.main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
        reload_dirs=["shellframer"],
    )
