"""Shared console helpers for boots.

Everything user-facing goes through one Rich console so that log records
(via ``RichHandler``) and regular output interleave cleanly.
"""

from __future__ import annotations

from pathlib import Path, PurePath

from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.tree import Tree

console = Console()


# ---------------------------------------------------------------------------
# Rich output
# ---------------------------------------------------------------------------


def print_summary_table(data: dict[str, str], title: str = "Summary") -> None:
    """Print a two-column key/value summary table.

    Args:
        data: Mapping of label -> value.
        title: Table title.
    """
    table = Table(title=escape(title), show_header=True, header_style="bold cyan")
    table.add_column("Item", style="dim", no_wrap=True)
    table.add_column("Value")

    for key, value in data.items():
        table.add_row(escape(key), escape(str(value)))

    console.print(table)
    console.print()


def build_tree(root: str | Path, paths: list[PurePath]) -> Tree:
    """Build a ``rich.tree.Tree`` of *paths* (relative) under *root*.

    Directories are listed before files at every level, both sorted by name.
    """
    label = Path(root).name or str(root)
    tree = Tree(f"[bold blue]{escape(label)}/[/bold blue]")

    nested: dict[str, dict] = {}
    for path in paths:
        node = nested
        for part in PurePath(path).parts:
            node = node.setdefault(part, {})

    def _add(branch: Tree, children: dict[str, dict]) -> None:
        dirs = sorted(name for name, sub in children.items() if sub)
        files = sorted(name for name, sub in children.items() if not sub)
        for name in dirs:
            _add(branch.add(f"[bold blue]{escape(name)}/[/bold blue]"), children[name])
        for name in files:
            branch.add(escape(name))

    _add(tree, nested)
    return tree


def print_tree(root: str | Path, paths: list[PurePath]) -> None:
    """Print the created file tree."""
    console.print(build_tree(root, paths))
    console.print()


def print_success(message: str) -> None:
    """Print a green success message."""
    console.print(f"[bold green]{escape(message)}[/bold green]")


def print_error(message: str) -> None:
    """Print a red error message."""
    console.print(f"[bold red]Error:[/bold red] {escape(message)}")


def print_warning(message: str) -> None:
    """Print a yellow warning message."""
    console.print(f"[bold yellow]{escape(message)}[/bold yellow]")
