"""Interactive menu for building and listing a B-tree of line depths."""

from __future__ import annotations

import argparse
import re
import sys
from typing import Optional, Sequence

from ftkit.btree import ORDER, BTree, Line

__all__ = ["main"]

_INT = re.compile(r"\s*([+-]?\d+)")

_MENU = "1.Insert\n2.Enumerate\n3.Quit\n4.Set root to NULL\nEnter your choice : "


def _read_int(line: str) -> Optional[int]:
    match = _INT.match(line)
    return int(match.group(1)) if match else None


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the menu on standard input and output until Quit or end of input."""
    parser = argparse.ArgumentParser(
        description=f"Build a B-tree of order {ORDER} interactively."
    )
    parser.parse_args(argv)
    out = sys.stdout
    tree = BTree()
    out.write(f"Creation of B tree for M={ORDER}\n")
    while True:
        out.write(_MENU)
        line = sys.stdin.readline()
        if not line:
            return 0
        choice = _read_int(line)
        out.write("\n")
        if choice == 1:
            out.write("Enter the key : ")
            key_line = sys.stdin.readline()
            if not key_line:
                return 0
            key = _read_int(key_line)
            if key is not None:
                tree.insert(Line(z=key))
        elif choice == 2:
            out.write("Btree in sorted order is:\n")
            out.write(tree.format_in_order())
            out.write("\n")
        elif choice == 3:
            tree.clear()
            return 0
        elif choice == 4:
            tree = BTree()
        else:
            out.write("Wrong choice\n")


if __name__ == "__main__":
    sys.exit(main())