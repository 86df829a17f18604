from __future__ import annotations
import os
import html
import tempfile
import itertools
from typing import List
from . import APP_NAME, __version__
from .models import NodeKind, TreeNode
from .report import ReportModel, size_label
from .extensions import icon_for
from .errors import ReportWriteError

AUTHOR = "DirTreePy contributors"
LICENSE = "MIT"
LICENSE_URL = "https://opensource.org/licenses/MIT"

# -------------------- Style --------------------
REPORT_CSS = r"""
<style>
body { font-family: sans-serif; max-width: 1200px; margin: 0 auto; padding: 20px; }
body.dark { background-color: #1e1e1e; color: #ddd; }
body.light { background-color: #fff; color: #333; }

ul { list-style-type: none; padding-left: 1em; }
li { border-bottom: 1px solid #ddd; padding: 4px 0; position: relative; }
body.dark li { border-bottom-color: #555; }
li.folder > span { cursor: pointer; font-weight: bold; }
.file-size { position: absolute; right: 2vw; color: #666; font-size: 0.9em; }
body.dark .file-size { color: #aaa; }
.nested { display: none; }
.nested.visible { display: block; }
.marker-denied { color: orange; }
.marker-error { color: red; }

.tabs { margin-top: 2em; }
.tab-header { display: flex; list-style-type: none; padding: 0; margin: 0 0 10px 0; border-bottom: 2px solid #ccc; }
.tab-header li { padding: 10px 20px; cursor: pointer; margin-right: 5px;
                 border-top-left-radius: 5px; border-top-right-radius: 5px; }
body.light .tab-header li { background: #eee; color: #333; }
body.dark .tab-header li { background: #333; color: #eee; }
.tab-header li.active { font-weight: bold; border: 1px solid #ccc; border-bottom: none; }
body.light .tab-header li.active { background: #fff; }
body.dark .tab-header li.active { background: #1e1e1e; border-color: #888; }
.tab-pane { display: none; border: 1px solid #ccc; padding: 15px; }
.tab-pane.active { display: block; }
body.light .tab-pane { background: #fff; color: #333; }
body.dark .tab-pane { background: #2c2c2c; border-color: #555; color: #ddd; }

.mode-toggle { position: absolute; top: 1em; right: 2em; padding: 5px 10px; border-radius: 5px;
               font-size: 0.9em; cursor: pointer; user-select: none; z-index: 1000; }
body.dark .mode-toggle { background: #444; color: #ddd; }
body.light .mode-toggle { background: #ccc; color: #333; }
.footer { text-align: right; margin-top: 1em; font-size: 0.9em; color: gray; }
</style>
"""

REPORT_JS = r"""
<script>
function toggle(event, id) {
    const target = document.getElementById(id);
    if (target) { target.classList.toggle("visible"); }
    event.stopPropagation();
}

function showTab(id) {
    document.querySelectorAll('.tab-pane').forEach(el => el.classList.remove('active'));
    document.querySelectorAll('.tab-header li').forEach(el => el.classList.remove('active'));
    document.getElementById(id).classList.add('active');
    const ids = ['explorer', 'filetypes', 'unknownfiles'];
    const index = ids.indexOf(id);
    if (index !== -1) {
        document.querySelectorAll('.tab-header li')[index].classList.add('active');
    }
}

function toggleMode() {
    const body = document.body;
    const button = document.querySelector('.mode-toggle');
    if (body.classList.contains('dark')) {
        body.classList.replace('dark', 'light');
        button.textContent = '🌙 Dark Mode';
    } else {
        body.classList.replace('light', 'dark');
        button.textContent = '☀️ Light Mode';
    }
}
</script>
"""

def _displayable(s: str) -> str:
    # names that are not valid UTF-8 arrive with surrogate escapes from os.scandir
    return s.encode("utf-8", "surrogateescape").decode("utf-8", "replace")

def _esc(s: str) -> str:
    return html.escape(_displayable(s), quote=True)

# -------------------- Tree --------------------
def _render_children(out: List[str], node: TreeNode, ids: "itertools.count[int]"):
    for child in node.children:
        _render_node(out, child, ids)

def _render_node(out: List[str], node: TreeNode, ids: "itertools.count[int]"):
    if node.is_marker:
        css = "marker-error" if node.kind is NodeKind.ERROR else "marker-denied"
        out.append(f"<li><span class='{css}'>[{_esc(node.label)}]</span></li>\n")
        return

    size = _esc(size_label(node))
    if node.is_dir:
        node_id = f"node{next(ids)}"
        out.append(f"<li class='folder'><span onclick=\"toggle(event, '{node_id}')\">📁 "
                   f"{_esc(node.name)}</span><span class='file-size'>{size}</span>\n")
        out.append(f"<ul class='nested' id='{node_id}'>\n")
        _render_children(out, node, ids)
        out.append("</ul></li>\n")
        return

    ext = node.extension or ""
    out.append(f"<li>{icon_for(ext)} {_esc(node.name)} <small>({_esc(ext.upper())} file)</small>"
               f"<span class='file-size'>{size}</span></li>\n")

# -------------------- Document --------------------
def render_html(model: ReportModel) -> str:
    iso_generated = model.generated.isoformat(timespec="seconds")
    out: List[str] = [
        "<!DOCTYPE html>\n<html lang='en'>\n<head>\n<meta charset='UTF-8'>\n",
        f"<title>{_esc(APP_NAME)}</title>\n",
        f"<meta name='author' content='{_esc(AUTHOR)}'>\n",
        f"<meta name='license' content='{_esc(LICENSE)}'>\n",
        f"<meta name='version' content='{_esc(__version__)}'>\n",
        f"<meta name='generated' content='{_esc(iso_generated)}'>\n",
        f"<link rel='license' href='{_esc(LICENSE_URL)}'>\n",
        REPORT_CSS,
        REPORT_JS,
        "</head>\n<body class='dark'>\n",
        "<div class='mode-toggle' onclick='toggleMode()'>☀️ Light Mode</div>\n",
        f"<h2>{_esc(model.header.line())}</h2>\n",
        "<div class='tabs'>\n<ul class='tab-header'>\n"
        "<li class='active' onclick=\"showTab('explorer')\">Explorer</li>\n"
        "<li onclick=\"showTab('filetypes')\">File Types</li>\n"
        "<li onclick=\"showTab('unknownfiles')\">Unknown Files</li>\n"
        "</ul>\n<div class='tab-content'>\n",
    ]

    out.append("<div id='explorer' class='tab-pane active'>\n<ul>\n")
    _render_children(out, model.tree, itertools.count())
    out.append("</ul>\n</div>\n")

    out.append("<div id='filetypes' class='tab-pane'>\n<h3>File Type Overview</h3>\n")
    out.append("<table border='1' cellpadding='5' cellspacing='0'>\n<tr><th>File type</th><th>Count</th></tr>\n")
    for ext, count in model.ext_table:
        out.append(f"<tr><td>{_esc(ext)}</td><td>{count}</td></tr>\n")
    out.append("</table>\n</div>\n")

    out.append("<div id='unknownfiles' class='tab-pane'>\n"
               "<h3>Unknown file types (files without extension)</h3>\n<ul>\n")
    for p in model.unknown_files:
        shown = p.replace("\\", "/")
        out.append(f"<li>{_esc(shown)}</li>\n")
    out.append("</ul>\n</div>\n</div>\n</div>\n")

    stamp = model.generated.strftime("%Y-%m-%d %H:%M:%S")
    out.append(f"<div class='footer'>Tree index timestamp: {stamp}</div>\n</body></html>\n")
    return "".join(out)

# -------------------- Output --------------------
def write_report(text: str, output_path: str) -> str:
    """Write ``text`` to ``output_path`` in one step.

    The document goes to a temporary file next to the target and is moved
    into place, so a failed write never leaves a partial report behind.
    """
    output_path = os.path.abspath(output_path)
    folder = os.path.dirname(output_path)
    try:
        fd, tmp = tempfile.mkstemp(prefix=".dirtree-", suffix=".tmp", dir=folder)
    except OSError as e:
        raise ReportWriteError(f"Cannot write report to {folder}: {e}") from e
    try:
        with os.fdopen(fd, "w", encoding="utf-8", newline="\n") as f:
            f.write(text)
        os.chmod(tmp, 0o644)
        os.replace(tmp, output_path)
    except (OSError, ValueError) as e:
        try:
            os.remove(tmp)
        except OSError:
            pass
        raise ReportWriteError(f"Cannot write report {output_path}: {e}") from e
    return output_path
