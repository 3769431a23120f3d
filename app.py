"""Standarr entry point."""

import os

import uvicorn

from standarr.api.app import app
from standarr.config import DEFAULT_PORT

if __name__ == "__main__":
    port = int(os.environ.get("PORT", DEFAULT_PORT))
    uvicorn.run(app, host="0.0.0.0", port=port)
