from unittest.mock import Mock, patch

import pytest
import requests

from HNExceptions import HNMetaError
from HNMeta import HNMeta, parse_open_graph
from HNText import HNText
from HNTypes import HNItem

PAGE = """
<html><head>
  <title>ignored</title>
  <meta property="og:title" content="Y Combinator &amp; friends">
  <meta property='og:image' content='https://ycombinator.com/logo.png' />
  <meta name="og:site_name" content="YC">
  <meta property="og:title" content="second title loses">
  <meta name="description" content="not open graph">
</head><body>
  <meta property="og:description" content="body tags are ignored">
</body></html>
"""


def test_parse_open_graph():
    props = parse_open_graph(PAGE)

    assert props == {
        "title":     "Y Combinator & friends",
        "image":     "https://ycombinator.com/logo.png",
        "site_name": "YC",
    }


@patch("HNMeta.requests.get")
def test_fetch_meta(mock_get):
    mock_get.return_value = Mock(status_code=200, text=PAGE, content=PAGE.encode())

    meta = HNMeta().fetch_meta("http://ycombinator.com")

    assert meta.url == "http://ycombinator.com"
    assert meta.title == "Y Combinator & friends"
    assert meta.description is None
    mock_get.assert_called_once()
    assert mock_get.call_args.args[0] == "http://ycombinator.com"


@patch("HNMeta.requests.get")
def test_fetch_meta_http_error(mock_get):
    mock_get.return_value = Mock(status_code=404, text="", content=b"")

    with pytest.raises(HNMetaError) as exc_info:
        HNMeta().fetch_meta("http://example.com/gone")
    assert exc_info.value.status_code == 404


@patch("HNMeta.requests.get")
def test_fetch_meta_connection_error(mock_get):
    mock_get.side_effect = requests.ConnectionError("refused")

    with pytest.raises(HNMetaError):
        HNMeta().fetch_meta("http://example.com")


@patch("HNMeta.requests.get")
def test_for_item_without_url_makes_no_request(mock_get):
    assert HNMeta().for_item(HNItem(id=3, title="Ask HN: anything?")) is None
    mock_get.assert_not_called()


def test_text_to_text():
    markup = "It&#x27;s here.<p>See <a href=\"https://x.com\" rel=\"nofollow\">x.com</a> &gt; y<p><pre><code>  a = 1\n</code></pre>"

    assert HNText.to_text(markup) == "It's here.\n\nSee x.com > y\n\n  a = 1"


def test_text_preview():
    assert HNText.preview(None) == ""
    assert HNText.preview("one<p>two", length=20) == "one two"
    assert HNText.preview("abcdefghij", length=5) == "abcd…"
