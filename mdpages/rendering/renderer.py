import html
from markdown_it import MarkdownIt

from mdpages.rendering.front_matter import parse_front_matter
from mdpages.rendering.schemas import RenderedPage

ARTICLE_CLASSES = "max-w-3xl mx-auto prose lg:prose-xl dark:prose-dark"


def create_markdown_parser() -> MarkdownIt:
    return (
        MarkdownIt("commonmark", {"html": False})
        .enable("table")
        .enable("strikethrough")
    )


class PageRenderer:
    def __init__(self, *, stylesheet_urls: list[str]):
        self.stylesheet_urls = stylesheet_urls
        self.markdown = create_markdown_parser()

    def render_page(self, markdown_text: str) -> RenderedPage:
        front_matter = parse_front_matter(markdown_text)
        return RenderedPage(
            title=front_matter.metadata.get("title") or None,
            html=self.markdown.render(front_matter.body),
        )

    def render(self, markdown_text: str) -> str:
        page = self.render_page(markdown_text)
        return self.wrap_document(page)

    def wrap_document(self, page: RenderedPage) -> str:
        title = f"<title>{html.escape(page.title)}</title>\n" if page.title else ""
        stylesheets = "".join(
            f'<link rel="stylesheet" href="{html.escape(url)}" />\n'
            for url in self.stylesheet_urls
        )
        return (
            "<!DOCTYPE html>\n"
            "<html>\n"
            "<head>\n"
            '<meta charset="utf-8" />\n'
            f"{title}"
            '<meta http-equiv="X-UA-Compatible" content="IE=edge" />\n'
            '<meta name="viewport" content="width=device-width,initial-scale=1.0" />\n'
            f"{stylesheets}"
            "</head>"
            f'<body><article class="{ARTICLE_CLASSES}">'
            f"{page.html}"
            "</article></body></html>"
        )
