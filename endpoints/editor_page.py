from __future__ import annotations

import html
import json
from typing import Any

PUCK_VERSION = "0.19.3"
REACT_VERSION = "18.3.1"


def _json_for_script(payload: Any) -> str:
    # Safe inside <script type="application/json">: no closing tags, no HTML comments.
    return json.dumps(payload).replace("<", "\\u003c").replace(">", "\\u003e").replace("&", "\\u0026")


def dashboard_html(body: str, *, title: str = "Dashboard") -> str:
    return f"""
<!doctype html>
<html>
  <head><meta charset="utf-8"><title>{html.escape(title)}</title></head>
  <body>
    <main id="puck-render">{body}</main>
  </body>
</html>
""".strip()


def editor_html(*, page_id: str, data: Any, catalogue: dict[str, Any], publish_url: str, cdn_url: str) -> str:
    """
    Editor page. The Puck editor itself runs in the browser; this page only
    hands it the stored data and the block catalogue, and POSTs the editor
    state back to publish_url when the user hits Publish.
    """
    react = f"{cdn_url}/react@{REACT_VERSION}"
    react_dom = f"{cdn_url}/react-dom@{REACT_VERSION}/client?deps=react@{REACT_VERSION}"
    puck = f"{cdn_url}/@measured/puck@{PUCK_VERSION}?deps=react@{REACT_VERSION},react-dom@{REACT_VERSION}"
    puck_css = f"{cdn_url}/@measured/puck@{PUCK_VERSION}/puck.css"
    return f"""
<!doctype html>
<html>
  <head>
    <meta charset="utf-8">
    <title>Edit {html.escape(page_id)}</title>
    <link rel="stylesheet" href="{html.escape(puck_css)}">
  </head>
  <body>
    <div id="puck-root"></div>
    <script id="puck-data" type="application/json">{_json_for_script(data)}</script>
    <script id="puck-config" type="application/json">{_json_for_script(catalogue)}</script>
    <script type="module">
      import React from "{react}";
      import {{ createRoot }} from "{react_dom}";
      import {{ Puck }} from "{puck}";

      const h = React.createElement;
      const data = JSON.parse(document.getElementById("puck-data").textContent);
      const catalogue = JSON.parse(document.getElementById("puck-config").textContent);

      const renderers = {{
        StatCard: ({{ title, value }}) =>
          h("div", {{ style: {{ padding: "1rem", border: "1px solid #ccc", borderRadius: "4px" }} }},
            h("strong", null, title), h("p", null, value)),
        Grid: ({{ columns, children: Children }}) =>
          h(Children, {{ style: {{ display: "grid", gridTemplateColumns: `repeat(${{columns}}, 1fr)`, gap: "1rem" }} }}),
        Markdown: ({{ content }}) => h("div", {{ dangerouslySetInnerHTML: {{ __html: content }} }}),
      }};

      const components = {{}};
      for (const [name, spec] of Object.entries(catalogue.components)) {{
        const defaultProps = {{}};
        const fields = {{}};
        for (const [field, def] of Object.entries(spec.fields)) {{
          // Puck calls nested-children fields "slot".
          fields[field] = {{ type: def.type === "children" ? "slot" : def.type }};
          if (def.defaultValue !== undefined) defaultProps[field] = def.defaultValue;
        }}
        components[name] = {{ fields, defaultProps, render: renderers[name] }};
      }}

      async function onPublish(next) {{
        const resp = await fetch({_json_for_script(publish_url)}, {{
          method: "POST",
          headers: {{ "Content-Type": "application/json" }},
          body: JSON.stringify(next),
        }});
        if (!resp.ok) alert(`Publish failed (${{resp.status}})`);
      }}

      createRoot(document.getElementById("puck-root")).render(
        h(Puck, {{ config: {{ components }}, data, onPublish }})
      );
    </script>
  </body>
</html>
""".strip()
