"""Markup in, SCSS skeleton out — one call, zero config."""

from bemtree import generate

markup = """
<article class="card card--featured">
  <h2 class="card__title">Hello</h2>
  <p class="card__body card__body--muted">World</p>
</article>
"""

print(generate(markup))
