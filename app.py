"""Botpanel entry point."""
import uvicorn

from botpanel.api.app import app
from botpanel.config import Config

if __name__ == "__main__":
    uvicorn.run(app, host=Config.API_HOST, port=Config.API_PORT)
