"""Root landing page with API links."""

from html import escape


def render_root_page(app_name: str, version: str) -> str:
    """Return HTML for the root landing page."""
    name = escape(app_name)
    return f"""
<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>{name}</title>
    <style>
        body {{
            font-family: system-ui, sans-serif;
            margin: 0;
            padding: 2rem 1rem;
            background: #fafafa;
            color: #222;
        }}
        .wrap {{ max-width: 560px; margin: 0 auto; }}
        h1 {{ font-weight: 600; margin-bottom: 0.25rem; }}
        .tagline {{ color: #666; margin-top: 0; }}
        code {{ background: #eee; padding: 0.1rem 0.3rem; }}
        a.btn {{
            display: inline-block;
            margin: 1rem 0.5rem 0 0;
            padding: 0.5rem 1rem;
            border: 1px solid #333;
            color: #222;
            text-decoration: none;
        }}
    </style>
</head>
<body>
    <div class="wrap">
        <h1>{name}</h1>
        <p class="tagline">Event invitations, donors, and PMM review.</p>
        <p>API routes live under <code>/api</code>: events, donors, tasks,
        and the <code>/api/bccancer</code> donor-data pass-through.</p>
        <a href="/docs" class="btn">API docs (Swagger)</a>
        <a href="/api/health" class="btn">Health</a>
        <p><small>v{escape(version)}</small></p>
    </div>
</body>
</html>
""".strip()
