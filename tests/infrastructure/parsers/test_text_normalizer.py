"""
🧪 test_text_normalizer.py — очищення фрагментів HTML
"""

import pytest

from zozo_scraper.infrastructure.parsers import clean_html_text


@pytest.mark.parametrize(
    "fragment,expected",
    [
        ("<b>Tee</b> &amp; Co", "Tee & Co"),
        ("  \n <span>ロゴ</span>Tシャツ\n ", "ロゴTシャツ"),
        ("&quot;Quoted&quot; &#39;x&#39;", "\"Quoted\" 'x'"),
        ("&lt;b&gt;", "<b>"),
        ("&amp;lt;", "<"),             # &amp; раскрывается первым
        ("&nbsp;keep", "&nbsp;keep"),  # прочие сущности не трогаем
        ("", ""),
        ("<br/>", ""),
    ],
)
def test_clean_html_text(fragment, expected):
    assert clean_html_text(fragment) == expected
