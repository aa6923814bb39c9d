"""Application settings."""

import os
from pathlib import Path

# Database
WORDPRESS_DB_NAME = os.getenv("WORDPRESS_DB_NAME", "wordpress")
GRAPHER_DB_NAME = os.getenv("GRAPHER_DB_NAME", "grapher")
DB_HOST = os.getenv("DB_HOST", "localhost")
DB_PORT = int(os.getenv("DB_PORT", "3306"))
DB_USER = os.getenv("DB_USER", "root")
DB_PASS = os.getenv("DB_PASS", "")

# Logging
LOG_DIR = Path("logs")

# Grapher
GRAPHER_DIR = Path(os.getenv("GRAPHER_DIR", "../owid-grapher"))
BAKED_DIR = Path(os.getenv("BAKED_DIR", "baked"))
EXPORTS_DIR = BAKED_DIR / "exports"
RENDER_COMMAND = ["node", "dist/src/bakeChartsToImages.js"]
