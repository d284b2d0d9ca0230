import json
from pathlib import Path

import pytest

from core.logger import set_log_file

ARTICLE_TEMPLATE = """<html><head><title>{{title}}</title>
<meta name="description" content="{{description}}">
<link rel="canonical" href="{{canonical}}">
<script type="application/ld+json">{"headline": "{{jsonTitle}}", "description": "{{jsonDescription}}", "articleSection": "{{jsonCategory}}", "datePublished": "{{datePublished}}", "dateModified": "{{dateModified}}"}</script>
</head><body data-slug="{{slug}}"><span>{{category}}</span><time>{{dateFormatted}}</time>
{{content}}
{{unknownToken}}
</body></html>
"""

LISTING_TEMPLATE = """<html><body><p>{{articleCount}} articles</p>
<div class="pills">{{categoryPills}}</div>
<div class="grid">{{articleCards}}</div>
</body></html>
"""


@pytest.fixture(autouse=True)
def _log_to_tmp(tmp_path):
    set_log_file(tmp_path / "log.json")


@pytest.fixture
def templates_dir(tmp_path) -> Path:
    path = tmp_path / "templates"
    path.mkdir()
    (path / "article.html").write_text(ARTICLE_TEMPLATE, encoding="utf-8")
    (path / "listing.html").write_text(LISTING_TEMPLATE, encoding="utf-8")
    return path


@pytest.fixture
def write_dataset(tmp_path):
    def _write(records) -> Path:
        path = tmp_path / "data" / "articles.json"
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(records), encoding="utf-8")
        return path
    return _write


def make_record(slug, **fields):
    record = {
        "slug": slug,
        "title": slug.title(),
        "content": f"Body of {slug}.",
        "category": "General",
        "order": 1,
        "createdAt": "2024-01-01T00:00:00Z",
        "isPublished": True,
    }
    record.update(fields)
    return record
