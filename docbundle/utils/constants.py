DEFAULT_PROJECT_NAME = "FishNet"
DEFAULT_COMBINED_FILE = "CombinedDocs.md"
DEFAULT_HTML_FILE = "index.html"
DEFAULT_EXTENSIONS = (".md",)
# Top-level readme and sidebar navigation are not content pages.
DEFAULT_EXCLUDE = ("README.md", "_sidebar.md")
DEFAULT_LOG_LEVEL = "WARNING"

LOCAL_CONFIG_FILE = "docbundle.ini"

DOC_PREAMBLE = "# {title}\n\n"
SECTION_TEMPLATE = "\n\n---\n\n# {title}\n\n{body}\n"

CSS_PAGE = """
    body {
      font-family: system-ui, sans-serif;
      padding: 2rem;
      max-width: 900px;
      margin: auto;
      line-height: 1.6;
    }
    pre {
      background: #f4f4f4;
      padding: 1rem;
      overflow-x: auto;
    }
    code {
      font-family: Consolas, monospace;
    }
    table { border-collapse: collapse; }
    th, td { border: 1px solid #ddd; padding: .4rem .6rem; }
    h1, h2, h3 {
      margin-top: 2rem;
    }
    hr {
      margin: 3rem 0;
    }
"""

HTML_TEMPLATE = """<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="UTF-8" />
  <meta name="viewport" content="width=device-width, initial-scale=1.0"/>
  <title>{title}</title>
  <style>{css}</style>
</head>
<body>
{body}
</body>
</html>
"""
