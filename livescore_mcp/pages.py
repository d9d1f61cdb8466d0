"""Static HTML and text served next to the MCP endpoints."""

SITE_URL = "https://livescoremcp.com"

ROBOTS_TXT = f"""User-agent: *
Allow: /
Disallow: /sse
Disallow: /message
Disallow: /health

Sitemap: {SITE_URL}/sitemap.xml
"""

SITEMAP_XML = f"""<?xml version="1.0" encoding="UTF-8"?>
<urlset xmlns="http://www.sitemaps.org/schemas/sitemap/0.9">
  <url>
    <loc>{SITE_URL}/</loc>
    <lastmod>2026-02-24</lastmod>
    <changefreq>weekly</changefreq>
    <priority>1.0</priority>
  </url>
  <url>
    <loc>{SITE_URL}/privacy</loc>
    <lastmod>2026-02-24</lastmod>
    <changefreq>monthly</changefreq>
    <priority>0.3</priority>
  </url>
  <url>
    <loc>{SITE_URL}/terms</loc>
    <lastmod>2026-02-24</lastmod>
    <changefreq>monthly</changefreq>
    <priority>0.3</priority>
  </url>
</urlset>
"""

_HEAD = """<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="UTF-8">
<meta name="viewport" content="width=device-width, initial-scale=1.0">
<title>{title}</title>
<meta name="description" content="{description}">
<link rel="canonical" href="{canonical}">
<link rel="icon" href="/static/logo.svg" type="image/svg+xml">
<link rel="stylesheet" href="/static/style.css">
</head>
<body>
"""

_FOOTER = """<footer class="footer">
  <a href="/privacy">Privacy Policy</a> &bull; <a href="/terms">Terms of Service</a><br>
  Powered by <a href="https://football-mania.com">football-mania.com</a>
</footer>
</body>
</html>"""


def _page(title: str, description: str, path: str, body: str) -> str:
    head = _HEAD.format(title=title, description=description, canonical=f"{SITE_URL}{path}")
    return head + body + _FOOTER


LANDING_HTML = _page(
    "LiveScore MCP - Football Live Scores API for AI Agents",
    "Connect Claude, ChatGPT and other AI agents to real-time football scores, fixtures, teams and players via MCP.",
    "/",
    """<header class="hero">
  <img src="/static/logo.svg" alt="" width="64" height="64">
  <h1>LiveScore MCP</h1>
  <p>Real-time football data for AI agents over the Model Context Protocol.</p>
  <code class="endpoint">{"url": "https://livescoremcp.com/sse"}</code>
</header>
<main class="content">
  <h2>Tools</h2>
  <ul class="tools">
    <li><b>get_live_scores</b> &mdash; matches in play right now</li>
    <li><b>get_fixtures</b> &mdash; fixtures for a competition</li>
    <li><b>search</b> &mdash; teams, players and competitions by name</li>
    <li><b>get_league_fixtures</b> &mdash; fixtures for a league</li>
    <li><b>get_team</b> &mdash; squad and statistics for a team</li>
    <li><b>get_player</b> &mdash; career and statistics for a player</li>
    <li><b>get_match</b> &mdash; events, lineups, stats and head-to-head</li>
    <li><b>get_day_fixtures</b> &mdash; every fixture on a given date</li>
    <li><b>get_team_image</b> &mdash; team logo URL</li>
    <li><b>health</b> &mdash; connectivity check</li>
  </ul>
  <h2>Connect</h2>
  <p>Add the server to any MCP client that supports the SSE transport using the URL above.
     All timestamps are GMT/UTC.</p>
</main>
""",
)

PRIVACY_HTML = _page(
    "Privacy Policy - LiveScore MCP",
    "Privacy Policy for LiveScore MCP - Football Live Scores API for AI Agents",
    "/privacy",
    """<main class="content legal">
  <h1>Privacy Policy</h1>
  <p>LiveScore MCP does not require an account and does not store tool requests or their results.</p>
  <h2>Data we process</h2>
  <p>Client IP addresses are held in memory for rate limiting and discarded after ten minutes of
     inactivity. Tool arguments are forwarded to the football data provider to answer the request.</p>
  <h2>Cookies</h2>
  <p>This site sets no cookies.</p>
  <h2>Contact</h2>
  <p>Questions can be raised through the project's source repository.</p>
</main>
""",
)

TERMS_HTML = _page(
    "Terms of Service - LiveScore MCP",
    "Terms of Service for LiveScore MCP - Football Live Scores API for AI Agents",
    "/terms",
    """<main class="content legal">
  <h1>Terms of Service</h1>
  <p>LiveScore MCP is provided as is, without warranty of any kind. Football data is supplied by a
     third party and may be delayed, incomplete or inaccurate.</p>
  <h2>Fair use</h2>
  <p>Message requests are limited to 30 per minute per client. Automated scraping of the
     underlying data is not permitted.</p>
  <h2>Changes</h2>
  <p>These terms may change at any time; continued use means acceptance of the current version.</p>
</main>
""",
)


__all__ = [
    "ROBOTS_TXT",
    "SITEMAP_XML",
    "LANDING_HTML",
    "PRIVACY_HTML",
    "TERMS_HTML",
]
