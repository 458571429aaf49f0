"""
Run the Quest API server.

Usage:
    python -m quest_api
"""

import uvicorn

from quest_api.configs import get_settings

if __name__ == "__main__":
    uvicorn.run("quest_api.api.main:app", host="0.0.0.0", port=get_settings().port)
