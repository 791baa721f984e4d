"""Render Jinja2 template files shipped inside a starter recipe."""

from pathlib import Path

import jinja2


def render_template_file(template_path: str, **kwargs) -> str:
    """Load the Jinja2 template at *template_path* and render it.

    Args:
        template_path: Path to a ``.j2`` file.
        **kwargs: Template variables.

    Returns:
        The rendered template string.

    Raises:
        FileNotFoundError: If the template file does not exist
        jinja2.TemplateError: If the template cannot be parsed or rendered
    """
    source = Path(template_path).read_text(encoding="utf-8")
    template = jinja2.Template(source, keep_trailing_newline=True, undefined=jinja2.StrictUndefined)
    return template.render(**kwargs)
