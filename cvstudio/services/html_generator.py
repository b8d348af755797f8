"""Service for generating preview HTML from the visual tree."""

from pathlib import Path
from jinja2 import Environment, FileSystemLoader, select_autoescape
from cvstudio.models.theme_models import ThemeDefinition
from cvstudio.models.visual_models import VisualNode
from cvstudio.utils.template_helpers import register_jinja_filters

PAGE_WIDTH = "210mm"
PAGE_HEIGHT = "297mm"


class HtmlGenerator:
    """Service to generate CV preview HTML from Jinja2 templates."""

    def __init__(self, template_dir: Path = None):
        """
        Initialize the HTML generator.

        Args:
            template_dir: Directory containing Jinja2 templates. Defaults to cvstudio/templates/
        """
        if template_dir is None:
            # Get the package directory (parent of services)
            package_dir = Path(__file__).parent.parent
            template_dir = package_dir / "templates"

        self.template_dir = template_dir
        self.env = Environment(
            loader=FileSystemLoader(str(template_dir)),
            autoescape=select_autoescape(['html', 'xml'])
        )

        # Register custom filters
        register_jinja_filters(self.env)

    def generate_html(self, tree: VisualNode, theme: ThemeDefinition, for_export: bool = False) -> str:
        """
        Generate CV HTML from a rendered visual tree.

        Args:
            tree: Root node returned by the preview renderer
            theme: Theme the tree was rendered with
            for_export: Pin the page to A4 with the theme background for rasterizing

        Returns:
            str: Rendered HTML string
        """
        template = self.env.get_template("cv_template.html")
        return template.render(
            tree=tree,
            theme=theme,
            two_column=theme.is_two_column,
            for_export=for_export,
            page_width=PAGE_WIDTH,
            page_height=PAGE_HEIGHT,
        )
