#!/usr/bin/env python3
"""Render a showcase diagnostic against in-memory sources.

Exercises every layout feature: stacked spans, a label at the primary
location, a bridge line, an elided gap, a second file and unlocated
trailing notes.
"""

from __future__ import annotations

import argparse
import sys

from spanreport import (
    ColorMode,
    DisplayStyle,
    Location,
    MemoryLineSource,
    RenderConfig,
    SourceFile,
    error,
)

EXAMPLE = """#include "reporter.hpp"

int main() {
    auto file = new reporter::SimpleFile("example.cpp");
    reporter::report(
        reporter::Error("a complex error")
    );
    return 0;
}
"""

HELPERS = """// helpers
#include <string>

namespace util {
    std::string describe(int value);
}
"""


def main() -> None:
    """Parse options and print the showcase diagnostic."""
    parser = argparse.ArgumentParser(description="Render a showcase diagnostic")
    parser.add_argument("--short", action="store_true", help="One line per diagnostic")
    parser.add_argument("--no-color", action="store_true", help="Never emit escape sequences")
    args = parser.parse_args()

    example = SourceFile("example.cpp")
    helpers = SourceFile("helpers.hpp")
    source = MemoryLineSource({example.name: EXAMPLE, helpers.name: HELPERS})

    config = RenderConfig(
        display_style=DisplayStyle.SHORT if args.short else DisplayStyle.RICH,
        color_mode=ColorMode.NEVER if args.no_color else ColorMode.AUTO,
    )

    (
        error(
            "a complex error",
            Location(4, 9, 13, example),
            "this is where the error is",
            code="E0001",
        )
        .with_note("a relevant include", Location(1, 0, 8, example))
        .with_note("curly brace", Location(3, 11, 12, example))
        .with_note("a type", Location(4, 4, 8, example))
        .with_note("assignment", Location(4, 14, 15, example))
        .with_note("a variable with a long explanation\nspanning two lines", Location(4, 9, 13, example))
        .with_help("the call", Location(4, 20, 41, example))
        .with_help("the whole initializer", Location(4, 16, 55, example))
        .with_note("closing brace", Location(9, 0, 1, example))
        .with_note("declared here", Location(5, 16, 24, helpers))
        .with_help("a general help message,\nnot tied to any position")
        .with_note("can also be a note")
        .print(sys.stdout, config, source=source)
    )


if __name__ == "__main__":
    main()
