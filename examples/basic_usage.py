#!/usr/bin/env python3
"""
Basic usage example for slump.

This example shows building a message, rendering it, and turning a
template into a raisable error.
"""

import slump
from slump import Delimiters


def main():
    """Demonstrate basic slump usage."""
    print("slump - Basic Usage Example")
    print("=" * 40)

    m = slump.new("{lang} {version} is released")
    m.add({"lang": "Go", "version": "1.7"})
    print(m)

    print(slump.render_str('pi is about {printf("%.2f", pi)}', {"pi": 3.14159}))

    shell = slump.new("cd ${path}", Delimiters("${", "}"))
    shell.set("path", "/tmp")
    print(shell.render())

    # Rendering problems surface from render() but not from str()
    broken = slump.new("Hello, {name}")
    broken.set("other", 1)
    print(f"str(): {broken}")
    try:
        broken.render()
    except slump.TemplateExecutionError as e:
        print(f"render(): {type(e).__name__}: {e}")

    try:
        raise slump.render_err("no such file or directory: {path}", {"path": "filename.txt"})
    except slump.FormattedError as e:
        print(f"error: {e}")


if __name__ == "__main__":
    main()
