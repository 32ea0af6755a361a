#!/usr/bin/env python
"""Script to run the Taskboard API server."""
import os
import sys
from pathlib import Path

# Run from the project root so relative sqlite paths land there
project_dir = Path(__file__).resolve().parent
sys.path.insert(0, str(project_dir))
os.chdir(project_dir)

import uvicorn

from taskboard.config import HOST, PORT

if __name__ == "__main__":
    uvicorn.run(
        "taskboard.main:app",
        host=HOST,
        port=PORT,
        reload=True,
    )
