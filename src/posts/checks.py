"""System checks for the post feed."""

from django.core.checks import Error, register
from django.template import TemplateDoesNotExist
from django.template.loader import get_template


@register()
def index_template_is_loadable(app_configs, **kwargs):
    """Ensure the template rendered by the index view can be found."""
    # Import here to avoid loading views before the app registry is ready.
    from posts.views import INDEX_TEMPLATE

    errors: list[Error] = []
    try:
        get_template(INDEX_TEMPLATE)
    except TemplateDoesNotExist:
        errors.append(
            Error(
                f"Template {INDEX_TEMPLATE!r} used by posts.views.index cannot be loaded.",
                hint="Check TEMPLATES['DIRS'] and that APP_DIRS is enabled.",
                id="posts.E001",
            )
        )
    return errors
