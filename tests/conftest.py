"""
Shared pytest fixtures for the todoscan test suite.

This module provides:
- Sample TypeScript and Python sources containing TODO comments
- A temporary project tree with mixed source files

Fixture Naming Convention:
- tmp_* : Fixtures that create temporary directories/files
- sample_* : Fixtures that provide sample content strings
"""
from __future__ import annotations

import textwrap
from pathlib import Path

import pytest


# =============================================================================
# Sample Source Fixtures
# =============================================================================

@pytest.fixture
def sample_ts_code() -> str:
    """
    TypeScript source mixing every comment shape.

    Contains:
    - A block-doc comment with an @todo directive (line 5)
    - A line comment with TODO: (line 11)
    - An indented line comment with TODO: (line 13, col 5)
    - A single-line block comment without a marker
    - An indented block-doc comment with TODO: on a gutter line (line 22, col 3)
    """
    return textwrap.dedent('''\
        /**
         * Greeter module.
         *
         * Prints greetings.
         * @todo Decide what else a greeter should do
         */
        export function greet(name: string): string {
          return `Hello, ${name}`;
        }

        // TODO: Do something here
        export function log(value: unknown): void {
            // TODO: Print message when strings are passed
            console.log(value);
        }

        /* nothing to see here */
        export interface Person {
          /**
           * The person's name.
           *
           * TODO: split into first and last name
           */
          name: string;
        }
    ''')


@pytest.fixture
def sample_python_code() -> str:
    """
    Python source with ``#`` comments.

    Contains:
    - A TODO: comment at the start of a line (line 1)
    - A trailing TODO: comment (line 4, col 15)
    - A comment without a marker
    """
    return textwrap.dedent('''\
        # TODO: Add configuration loading
        def main():
            # Entry point
            return 1  # TODO: return something useful
    ''')


# =============================================================================
# Temporary Project Fixtures
# =============================================================================

@pytest.fixture
def tmp_project(tmp_path: Path, sample_ts_code: str, sample_python_code: str) -> Path:
    """
    Create a small project tree.

    Structure:
        tmp_path/
            src/
                greeter.ts      (4 TODOs)
                app.py          (2 TODOs)
                clean.js        (no TODOs)
                notes.txt       (unsupported, ignored)
            node_modules/
                dep/index.js    (excluded directory)
    """
    src = tmp_path / "src"
    src.mkdir()
    (src / "greeter.ts").write_text(sample_ts_code)
    (src / "app.py").write_text(sample_python_code)
    (src / "clean.js").write_text("// just a comment\nconst x = 1;\n")
    (src / "notes.txt").write_text("TODO: this is not source code\n")

    dep = tmp_path / "node_modules" / "dep"
    dep.mkdir(parents=True)
    (dep / "index.js").write_text("// TODO: vendored code\n")

    return tmp_path
