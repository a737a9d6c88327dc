# =============================================================================
# app/templating.py - Jinja2 Template Environment
# =============================================================================
# One shared template environment for pages and card fragments.
# =============================================================================

from pathlib import Path

from fastapi.templating import Jinja2Templates

TEMPLATES_DIR = Path(__file__).parent / "templates"

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))
