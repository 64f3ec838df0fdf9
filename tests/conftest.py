"""Shared fixtures for checking documentation comment snippets.

Sources are written the way they appear in a C# file; violations are
reported as one-based ``(line, column)`` pairs so that expectations read
like editor positions.
"""

from __future__ import annotations

from typing import Callable, Optional

import pytest

from docperiod.engine import ReferenceResolver, apply_edits, synthesize_fixes
from docperiod.resolver import InMemoryResolver
from docperiod.source import LineIndex, check_source

Positions = list[tuple[int, int]]

CLASS_DOC = """<?xml version="1.0" encoding="utf-8" ?>
<TestClass>
  <summary>Test class</summary>
</TestClass>
"""

INVALID_CLASS_DOC = """<?xml version="1.0" encoding="utf-8" ?>
<TestClass>
  <summary>Test class<summary>
</TestClass>
"""

PROPERTY_DOC = """<?xml version="1.0" encoding="utf-8" ?>
<TestClass>
  <TestProperty>
    <summary>Gets or sets test property</summary>
    <value>Dummy integer</value>
  </TestProperty>
</TestClass>
"""

METHOD_DOC = """<?xml version="1.0" encoding="utf-8" ?>
<TestClass>
  <TestMethod>
    <summary>Test method</summary>
    <typeparam name="T">Template type</typeparam>
    <param name="arg1">First argument</param>
    <returns>Some value</returns>
    <remarks>Random remark</remarks>
    <example>Random example</example>
    <exception cref="System.Exception">Exception description</exception>
    <permission cref="System.Security.PermissionSet">Everyone</permission>
  </TestMethod>
</TestClass>
"""

FIXED_METHOD_DOC = """<TestClass>
  <TestMethod>
    <summary>Test method.</summary>
    <returns>Some value.</returns>
  </TestMethod>
</TestClass>
"""


@pytest.fixture
def include_resolver() -> InMemoryResolver:
    """Resolver serving the external documents used by include tests."""

    return InMemoryResolver(
        {
            "ClassInheritDoc.xml": CLASS_DOC,
            "InvalidClassInheritDoc.xml": INVALID_CLASS_DOC,
            "PropertyInheritDoc.xml": PROPERTY_DOC,
            "MethodInheritDoc.xml": METHOD_DOC,
            "FixedMethodInheritDoc.xml": FIXED_METHOD_DOC,
        }
    )


@pytest.fixture
def positions() -> Callable[..., Positions]:
    """Return a helper listing violation positions of a source."""

    def _positions(
        source: str, resolver: Optional[ReferenceResolver] = None
    ) -> Positions:
        result = check_source(source, resolver)
        index = LineIndex.from_text(source)
        return [
            index.line_col(v.report_span.start) for v in result.violations
        ]

    return _positions


@pytest.fixture
def fix() -> Callable[..., str]:
    """Return a helper applying every synthesized fix to a source."""

    def _fix(
        source: str, resolver: Optional[ReferenceResolver] = None
    ) -> str:
        result = check_source(source, resolver)
        return apply_edits(source, synthesize_fixes(result.violations))

    return _fix
