"""Pure string resolution of ``.`` and ``..`` segments.

No filesystem access: the segments need not exist. The host root of the
path (``/``, or a drive such as ``C:/`` on Windows) is kept, and ``..`` that
would climb above the start of the path (or above the root) is kept
literally, so

    collapse("a/b/../c")  == "a/c"
    collapse("../../a")   == "../../a"
    collapse("/a/../..")  == "/.."

Empty segments from doubled separators are ignored. A path that collapses
to nothing becomes ``"."``. The function is idempotent.
"""

from __future__ import annotations

from typing import List

from .normalized import IS_WINDOWS, path_root


def collapse(full_path: str, *, windows: bool = IS_WINDOWS) -> str:
    root = path_root(full_path, windows=windows)

    stack: List[str] = []
    for segment in full_path[len(root):].split("/"):
        if segment in ("", "."):
            continue
        if segment == "..":
            if stack and stack[-1] != "..":
                stack.pop()
            else:
                stack.append(segment)
            continue
        stack.append(segment)

    body = "/".join(stack)
    if not root:
        return body or "."
    return root + body


__all__ = ["collapse"]
