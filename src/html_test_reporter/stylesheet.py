"""Stylesheet provider: packaged default or the configured override file."""

from pathlib import Path

from ._util import debug
from .config import ReporterConfig
from .errors import StylesheetNotFoundError

DEFAULT_STYLESHEET_PATH = Path(__file__).resolve().parent / "templates" / "style.css"


def default_stylesheet() -> str:
    return DEFAULT_STYLESHEET_PATH.read_text(encoding="utf-8")


def get_stylesheet(config: ReporterConfig) -> str:
    """
    Return the stylesheet to inline into the report.

    Without styleOverridePath the built-in stylesheet is returned unchanged.
    An unreadable override raises StylesheetNotFoundError.
    """
    if not config.style_override_path:
        return default_stylesheet()
    path = Path(config.style_override_path)
    try:
        content = path.read_text(encoding="utf-8")
    except OSError as exc:
        debug("stylesheet", f"cannot read {path}: {exc}")
        raise StylesheetNotFoundError(config.style_override_path) from exc
    debug("stylesheet", f"using override {path}")
    return content
