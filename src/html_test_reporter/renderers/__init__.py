"""
Renderers turn a RunResult into a ReportDocument and serialize it with Jinja2.
"""

from pathlib import Path
from typing import Optional

from jinja2 import Environment, FileSystemLoader
from markupsafe import Markup

from ..schema import ReportDocument

from .document import DocumentBuilder, create_document
from .html_report import classify, render, strip_ansi

TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "templates"
REPORT_TEMPLATE = "report.html.j2"

__all__ = [
    "DocumentBuilder",
    "classify",
    "create_document",
    "make_environment",
    "render",
    "strip_ansi",
    "to_html",
]


def make_environment() -> Environment:
    return Environment(
        loader=FileSystemLoader(str(TEMPLATES_DIR)),
        autoescape=True,
    )


def to_html(document: ReportDocument, env: Optional[Environment] = None) -> str:
    """Serialize a finished document to HTML text."""
    if env is None:
        env = make_environment()
    elif env.loader is None:
        env = env.overlay(loader=FileSystemLoader(str(TEMPLATES_DIR)))
    template = env.get_template(REPORT_TEMPLATE)
    # Stylesheets are inlined verbatim; escaping would break CSS selectors like ">".
    return template.render(doc=document, stylesheet=Markup(document.stylesheet))
