# templates/fragments.py

ARTICLE_CARD = (
    '\n      <a href="{url}" class="article-card" data-category="{category}">'
    '\n        <span class="article-category">{category}</span>'
    '\n        <h3>{title}</h3>'
    '\n        <p>{description}</p>'
    '\n        <span class="article-date">{date}</span>'
    '\n      </a>'
)

CATEGORY_PILL = '<button class="category-pill" data-filter="{category}">{category}</button>'

CARD_SEPARATOR = "\n"

PILL_SEPARATOR = "\n          "
