"""Render the Jinja2 templates that reviewkit ships for its terminal output."""

import functools
import importlib.resources

import jinja2


def _package_loader(package: str) -> jinja2.FunctionLoader:
    templates = importlib.resources.files(f"{package}.templates")

    def load(name):
        resource = templates.joinpath(name)
        if not resource.is_file():
            return None
        return resource.read_text(encoding="utf-8")

    return jinja2.FunctionLoader(load)


@functools.lru_cache(maxsize=None)
def _environment(package: str) -> jinja2.Environment:
    return jinja2.Environment(
        loader=_package_loader(package),
        undefined=jinja2.StrictUndefined,
        trim_blocks=True,
        autoescape=False,
    )


def render_template(template_name: str, *, package: str, **kwargs) -> str:
    """Render *template_name* from the ``templates`` directory beside *package*.

    Block tags swallow the newline that follows them. A variable the template
    uses but the caller did not pass raises jinja2.UndefinedError instead of
    rendering as an empty string.
    """
    template = _environment(package).get_template(template_name)
    return template.render(**kwargs)
