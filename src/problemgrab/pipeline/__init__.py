# topmark:header:start
#
#   project      : ProblemGrab
#   file         : __init__.py
#   file_relpath : src/problemgrab/pipeline/__init__.py
#   license      : MIT
#   copyright    : (c) 2026 ProblemGrab contributors
#
# topmark:header:end

"""Diagnostic aggregation pipeline.

Stages, leaves first:
    * `snippets`: source line and numbered context window extraction.
    * `categories`: classification key extraction and the low-value category deny-list.
    * `normalize`: HTML-to-Markdown normalization of diagnostic descriptions.
    * `filter`: severity/category filtering and enrichment of raw engine records.
    * `context`: the explicit `GrabContext` passed to every stage.
    * `collect`: file and project traversal.

`problemgrab.runner` drives one capture from request to rendered report.
"""

from __future__ import annotations
