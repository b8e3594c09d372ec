"""Shared test fixtures."""

from __future__ import annotations

import pytest


FILLED_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 24 24"><path fill="#000000" d="M4 4h16v16H4z"/></svg>'''

LINE_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" width="24" height="24" viewBox="0 0 24 24" fill="none" stroke="currentColor" stroke-width="2" stroke-linecap="round" stroke-linejoin="round">
  <circle cx="12" cy="12" r="10"/>
  <path d="M8 14s1.5 2 4 2 4-2 4-2"/>
</svg>'''

STROKE_NONE_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 24 24">
  <path fill="#333333" stroke="none" d="M2 2h20v20H2z"/>
</svg>'''

# All three color surfaces in one document
MIXED_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 32 32">
  <style>
    .body { fill: #111111; fill-opacity: 0.8; stroke: none; }
    .edge { stroke:#222222; stroke-width: 2 }
  </style>
  <rect class="body" x="2" y="2" width="28" height="28"/>
  <circle fill="none" stroke="#444444" cx="16" cy="16" r="6"/>
  <path style="fill: #555555; stroke-width: 1.5" d="M8 8l16 16"/>
  <path style="opacity:0.5;" d="M8 24l16-16"/>
</svg>'''

NO_VIEWBOX_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" width="48" height="48"><path fill="#0000ff" d="M0 0h48v48H0z"/></svg>'''


@pytest.fixture
def filled_svg() -> str:
    return FILLED_SVG


@pytest.fixture
def line_svg() -> str:
    return LINE_SVG


@pytest.fixture
def mixed_svg() -> str:
    return MIXED_SVG


@pytest.fixture
def stroke_none_svg() -> str:
    return STROKE_NONE_SVG
