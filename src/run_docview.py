from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

from rich.console import Console
from rich.logging import RichHandler
from rich.markdown import Markdown
from rich.padding import Padding
from tqdm import tqdm

from docview.config import CONFIG
from docview.docs.decoder import load_package
from docview.docs.layout import page_blocks
from docview.render.entries import module_links, render_entry, render_module
from docview.types import ModuleDoc
from docview.utils import now_iso, write_json

console = Console()

def print_module(out: Console, module: ModuleDoc, line_width: Optional[int] = None) -> None:
    links = module_links(module)
    out.rule(f"[bold]{module.name}[/bold]")
    for block in page_blocks(module):
        if block.kind == "MARKDOWN":
            out.print(Markdown(block.text))
            continue
        r = render_entry(block.entry, links, line_width, module.name)
        sig = r.signature.to_rich(CONFIG.keyword_style, CONFIG.link_style, CONFIG.name_style)
        if r.fixity:
            sig.append(f"    {r.fixity}", style=CONFIG.keyword_style)
        out.print(sig)
        if r.comment.strip():
            out.print(Padding(Markdown(r.comment), (0, 0, 1, CONFIG.indent)))

def module_to_json(module: ModuleDoc, line_width: Optional[int] = None) -> Dict[str, Any]:
    return {
        "name": module.name,
        "entries": [
            {"name": r.name, "signature": r.signature.plain(), "fixity": r.fixity, "comment": r.comment}
            for r in render_module(module, line_width)
        ],
    }

def main() -> None:
    ap = argparse.ArgumentParser(description="Render package documentation JSON")
    ap.add_argument("--docs", type=str, required=True, help="Path to documentation.json")
    ap.add_argument("--module", type=str, default=None, help="Only render this module")
    ap.add_argument("--width", type=int, default=None, help="Inline signature threshold")
    ap.add_argument("--html", type=str, default=None, help="Also export the rendering as HTML")
    ap.add_argument("--json", type=str, default=None, help="Write plain-text signatures as JSON")
    ap.add_argument("--verbose", action="store_true")
    args = ap.parse_args()

    logging.basicConfig(
        level="DEBUG" if args.verbose else CONFIG.log_level,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
    )

    try:
        modules = load_package(Path(args.docs))
    except (OSError, ValueError) as e:
        console.print(f"[red]Cannot read {args.docs}: {e}[/red]")
        sys.exit(1)
    if args.module:
        modules = [m for m in modules if m.name == args.module]
        if not modules:
            console.print(f"[yellow]Module not found: {args.module}[/yellow]")
            sys.exit(1)

    out = Console(record=True) if args.html else console
    writing = bool(args.html or args.json)
    results: List[Dict[str, Any]] = []
    for module in tqdm(modules, desc="Rendering", disable=not writing):
        try:
            print_module(out, module, args.width)
            results.append(module_to_json(module, args.width))
        except Exception as e:
            console.print(f"[red]Failed {module.name}: {e}[/red]")
            results.append({"name": module.name, "error": str(e)})

    if args.json:
        write_json(Path(args.json), {"generated_at": now_iso(), "modules": results})
        console.print(f"[green]Done. Signatures written to {args.json}[/green]")
    if args.html:
        out.save_html(args.html)
        console.print(f"[green]Done. HTML written to {args.html}[/green]")

if __name__ == "__main__":
    main()
