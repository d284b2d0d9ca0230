import xml.etree.ElementTree as ET
from pathlib import Path
from typing import List, Tuple

from models.article import Article
from utils.text_cleaner import today_iso

SITEMAP_NS = "http://www.sitemaps.org/schemas/sitemap/0.9"

# (path, changefreq, priority) for the fixed pages, lastmod is the build date
STATIC_ENTRIES = [
    ("/", "monthly", "1.0"),
    ("/learn/", "weekly", "0.8"),
]

ARTICLE_CHANGEFREQ = "monthly"
ARTICLE_PRIORITY = "0.7"


def sitemap_entries(site_url: str, articles: List[Article]) -> List[Tuple[str, str, str, str]]:
    """
    Returns (loc, lastmod, changefreq, priority) rows: site root, listing page, then articles.
    """
    today = today_iso()
    entries = [(f"{site_url}{path}", today, freq, priority) for path, freq, priority in STATIC_ENTRIES]
    for article in articles:
        entries.append((
            f"{site_url}{article.url_path}",
            article.last_modified.split("T")[0],
            ARTICLE_CHANGEFREQ,
            ARTICLE_PRIORITY,
        ))
    return entries


def build_sitemap(site_url: str, articles: List[Article]) -> ET.ElementTree:
    ET.register_namespace("", SITEMAP_NS)
    urlset = ET.Element(f"{{{SITEMAP_NS}}}urlset")

    for loc, lastmod, changefreq, priority in sitemap_entries(site_url, articles):
        url_el = ET.SubElement(urlset, f"{{{SITEMAP_NS}}}url")
        ET.SubElement(url_el, f"{{{SITEMAP_NS}}}loc").text = loc
        ET.SubElement(url_el, f"{{{SITEMAP_NS}}}lastmod").text = lastmod
        ET.SubElement(url_el, f"{{{SITEMAP_NS}}}changefreq").text = changefreq
        ET.SubElement(url_el, f"{{{SITEMAP_NS}}}priority").text = priority

    tree = ET.ElementTree(urlset)
    ET.indent(tree, space="  ", level=0)
    return tree


def write_sitemap(site_url: str, articles: List[Article], out_path: Path) -> Path:
    out_path.parent.mkdir(parents=True, exist_ok=True)
    build_sitemap(site_url, articles).write(out_path, encoding="UTF-8", xml_declaration=True)
    return out_path
