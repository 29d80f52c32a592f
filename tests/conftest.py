"""Shared page fixtures for the WikiRecord tests."""

from __future__ import annotations

import pytest

PERSON_PAGE = """
<html><body>
<h1 id="firstHeading" class="firstHeading"><span class="mw-page-title-main">Ada   Lovelace</span></h1>
<div id="mw-content-text">
<table class="infobox vcard"><tbody>
<tr><th colspan="2" class="infobox-above">Ada Lovelace</th></tr>
<tr><th scope="row" class="infobox-label">Born</th><td class="infobox-data">Augusta Ada Byron<br/><span style="display:none">(<span class="bday">1815-12-10</span>)</span>10 December 1815<br/>London, England</td></tr>
<tr><th scope="row" class="infobox-label">Died</th><td class="infobox-data">27 November 1852<br/>Marylebone, London</td></tr>
<tr><th scope="row" class="infobox-label">Resting place</th><td class="infobox-data">Church of St. Mary Magdalene<br/>Coordinates: <span class="geo-dms"><span class="latitude">53°01′N</span> <span class="longitude">1°12′W</span></span></td></tr>
</tbody></table>
<p><b>Augusta Ada King, Countess of Lovelace</b> was an English mathematician.</p>
<ul><li class="toclevel-1"><a href="#Biography">1 Biography</a></li></ul>
</div>
</body></html>
"""

DISAMBIGUATION_PAGE = """
<html><body>
<h1 id="firstHeading">Mercury</h1>
<div id="mw-content-text">
<p><b>Mercury</b> most commonly refers to:</p>
<ul>
<li><a href="/wiki/Mercury_(planet)">Mercury (planet)</a>, the nearest planet to the Sun</li>
<li><a href="/wiki/Mercury_(element)">Mercury (element)</a>, a chemical element</li>
<li><a href="/wiki/Mercury_(mythology)">Mercury (mythology)</a>, a Roman god</li>
</ul>
<p><b>Mercury</b> may also refer to:</p>
<ul>
<li class="toclevel-1 tocsection-1"><a href="#Science"><span>1</span> Science</a></li>
<li>Mercury Records, see <a href="/wiki/Mercury_Records">Mercury Records</a></li>
</ul>
</div>
</body></html>
"""


@pytest.fixture
def person_page() -> str:
    return PERSON_PAGE


@pytest.fixture
def disambiguation_page() -> str:
    return DISAMBIGUATION_PAGE
