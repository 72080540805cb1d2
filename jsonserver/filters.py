import re

from markupsafe import Markup, escape

_CODE_BLOCK = re.compile(r"```(\w+)?\n(.*?)```", re.S)


def _markdown_basic(text):
    """Just enough Markdown for the API docs page: code, headings, lists, emphasis."""
    html = str(escape(text or ""))
    html = _CODE_BLOCK.sub(r"<pre><code>\2</code></pre>", html)
    html = re.sub(r"`([^`]+)`", r"<code>\1</code>", html)
    html = re.sub(r"^### (.+)$", r"<h3>\1</h3>", html, flags=re.M)
    html = re.sub(r"^## (.+)$", r"<h2>\1</h2>", html, flags=re.M)
    html = re.sub(r"^# (.+)$", r"<h1>\1</h1>", html, flags=re.M)
    html = re.sub(r"^- (.+)$", r"<li>\1</li>", html, flags=re.M)
    html = re.sub(r"\*\*(.+?)\*\*", r"<strong>\1</strong>", html)
    html = re.sub(r"\*(.+?)\*", r"<em>\1</em>", html)
    html = re.sub(r"\n\n", "</p><p>", html)
    return Markup(html)


def register_filters(app):
    app.jinja_env.filters["markdown_basic"] = _markdown_basic
