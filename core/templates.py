
from pathlib import Path
from jinja2 import Environment, FileSystemLoader, select_autoescape

from core.number_format import format_turkish

TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "templates"

env = Environment(
    loader=FileSystemLoader(TEMPLATES_DIR),
    autoescape=select_autoescape(["html", "xml"]),
)
env.filters["tr_money"] = format_turkish


def render(template_name: str, **context) -> str:
    return env.get_template(template_name).render(**context)
