from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from models.article import Article
from utils.file_handler import load_dataset, reset_directory, save_page
from .logger import log_event
from .renderer import render_article_page, render_listing_page
from .sitemap import write_sitemap

ARTICLE_TEMPLATE = "article.html"
LISTING_TEMPLATE = "listing.html"


@dataclass
class BuildResult:
    articles: List[Article]
    categories: List[str]
    pages: List[Path] = field(default_factory=list)
    listing_path: Optional[Path] = None
    sitemap_path: Optional[Path] = None


def published_articles(records: list) -> List[Article]:
    """
    Keep published records, ordered by `order` ascending and then newest first.
    """
    articles = [Article.from_dict(record) for record in records if record.get("isPublished")]
    articles.sort(key=lambda article: article.created, reverse=True)
    articles.sort(key=lambda article: article.order)
    return articles


def collect_categories(articles: List[Article]) -> List[str]:
    return sorted({article.category for article in articles})


class SiteBuilder:
    def __init__(self, site_url: str, data_file: Path, output_dir: Path,
                 templates_dir: Path, sitemap_file: Path):
        self.site_url = site_url.rstrip("/")
        self.data_file = Path(data_file)
        self.output_dir = Path(output_dir)
        self.templates_dir = Path(templates_dir)
        self.sitemap_file = Path(sitemap_file)

    @classmethod
    def from_config(cls, config: dict) -> "SiteBuilder":
        return cls(
            config["site_url"],
            config["data_file"],
            config["output_dir"],
            config["templates_dir"],
            config["sitemap_file"],
        )

    def _read_template(self, name: str) -> str:
        return (self.templates_dir / name).read_text(encoding="utf-8")

    def build(self) -> Optional[BuildResult]:
        if not self.data_file.exists():
            print(f"No {self.data_file.name} found, skipping learn page generation.")
            log_event("INFO", "Dataset missing, skipping build", {"path": str(self.data_file)})
            self.output_dir.mkdir(parents=True, exist_ok=True)
            return None

        articles = published_articles(load_dataset(self.data_file))
        if not articles:
            print("No published articles, skipping learn page generation.")
            log_event("WARNING", "No published articles, output left untouched")
            return None

        categories = collect_categories(articles)
        article_template = self._read_template(ARTICLE_TEMPLATE)
        listing_template = self._read_template(LISTING_TEMPLATE)

        reset_directory(self.output_dir)
        result = BuildResult(articles=articles, categories=categories)

        for article in articles:
            html = render_article_page(article_template, article, self.site_url)
            page = save_page(self.output_dir / article.slug / "index.html", html)
            result.pages.append(page)
            print(f"  Generated: {article.url_path}")

        listing_html = render_listing_page(listing_template, articles, categories)
        result.listing_path = save_page(self.output_dir / "index.html", listing_html)
        print(f"  Generated: /learn/ ({len(articles)} articles)")

        result.sitemap_path = write_sitemap(self.site_url, articles, self.sitemap_file)
        print(f"  Updated {self.sitemap_file.name} with {len(articles)} article URLs")

        log_event("SUCCESS", "Learn pages built", {
            "articles": len(articles),
            "categories": categories,
        })
        return result
