"""Pytest configuration and shared fixtures for events2md test suite.

This module provides shared fixtures, test configuration, and utilities
that are used across the entire test suite.
"""

import os
from pathlib import Path
from typing import Generator

import pytest
from hypothesis import Phase, Verbosity, settings
from utils import cleanup_test_dir, create_test_temp_dir

from events2md.ast import (
    Document,
    FormatSpan,
    Heading,
    Link,
    List,
    ListItem,
    Paragraph,
    Table,
    TableCell,
    TableRow,
    Text,
)
from events2md.events import Format, ListType, ResourceReference

# Register custom Hypothesis profiles
settings.register_profile("ci", max_examples=100, verbosity=Verbosity.verbose)
settings.register_profile("dev", max_examples=20)
settings.register_profile(
    "debug", max_examples=10, verbosity=Verbosity.verbose, phases=[Phase.explicit, Phase.reuse, Phase.generate]
)

# Load profile from environment or use default
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "dev"))


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "integration: Integration tests - component interaction tests")
    config.addinivalue_line("markers", "cli: Tests related to command-line interface")


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Provide a temporary directory for test files.

    Yields
    ------
    Path
        Temporary directory path that will be cleaned up after test.

    """
    temp_path = create_test_temp_dir()
    try:
        yield temp_path
    finally:
        cleanup_test_dir(temp_path)


@pytest.fixture
def sample_document() -> Document:
    """Provide a document exercising headers, formats, links, lists and tables.

    Returns
    -------
    Document
        Document tree used across multiple tests.

    """
    return Document(
        children=[
            Heading(level=1, content=[Text(content="Sample Document")]),
            Paragraph(
                content=[
                    Text(content="This is a "),
                    FormatSpan(format=Format.BOLD, content=[Text(content="sample")]),
                    Text(content=" with a "),
                    Link(reference=ResourceReference("https://example.com"), content=[Text(content="link")]),
                    Text(content="."),
                ]
            ),
            List(
                list_type=ListType.BULLETED,
                items=[
                    ListItem(children=[Text(content="First")]),
                    ListItem(children=[Text(content="Second")]),
                ],
            ),
            Table(
                rows=[
                    TableRow(
                        cells=[
                            TableCell(content=[Text(content="Name")], header=True),
                            TableCell(content=[Text(content="Role")], header=True),
                        ]
                    ),
                    TableRow(
                        cells=[
                            TableCell(content=[Text(content="Ada")]),
                            TableCell(content=[Text(content="Engineer")]),
                        ]
                    ),
                ]
            ),
        ]
    )
