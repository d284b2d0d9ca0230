from typing import List

from models.article import Article
from templates.fragments import ARTICLE_CARD, CATEGORY_PILL, CARD_SEPARATOR, PILL_SEPARATOR
from utils.text_cleaner import (
    content_to_html,
    describe,
    escape_html,
    escape_json_string,
    fill_template,
    format_date,
    iso_timestamp,
)

PAGE_DESCRIPTION_LENGTH = 160
CARD_DESCRIPTION_LENGTH = 120


def canonical_url(site_url: str, article: Article) -> str:
    return f"{site_url}{article.url_path}"


def article_placeholders(article: Article, site_url: str) -> dict:
    description = describe(article.content, PAGE_DESCRIPTION_LENGTH)
    date_published = iso_timestamp(article.created_at)
    date_modified = iso_timestamp(article.updated_at) if article.updated_at else date_published
    return {
        "jsonTitle": escape_json_string(article.title),
        "jsonDescription": escape_json_string(description),
        "jsonCategory": escape_json_string(article.category),
        "title": escape_html(article.title),
        "description": escape_html(description),
        "canonical": canonical_url(site_url, article),
        "category": escape_html(article.category),
        "content": content_to_html(article.content),
        "datePublished": date_published,
        "dateModified": date_modified,
        "dateFormatted": format_date(article.created_at),
        "slug": article.slug,
    }


def render_article_page(template: str, article: Article, site_url: str) -> str:
    return fill_template(template, article_placeholders(article, site_url))


def render_article_card(article: Article) -> str:
    return ARTICLE_CARD.format(
        url=article.url_path,
        category=escape_html(article.category),
        title=escape_html(article.title),
        description=escape_html(describe(article.content, CARD_DESCRIPTION_LENGTH)),
        date=format_date(article.created_at),
    )


def render_category_pills(categories: List[str]) -> str:
    return PILL_SEPARATOR.join(
        CATEGORY_PILL.format(category=escape_html(category)) for category in categories
    )


def render_listing_page(template: str, articles: List[Article], categories: List[str]) -> str:
    """
    Fill the listing template with one card per article and one filter pill per category.
    """
    cards = CARD_SEPARATOR.join(render_article_card(article) for article in articles)
    return fill_template(template, {
        "articleCards": cards,
        "categoryPills": render_category_pills(categories),
        "articleCount": len(articles),
    })
