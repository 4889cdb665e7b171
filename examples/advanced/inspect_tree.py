"""Inspect the selector tree and dump it as JSON."""

from bemtree import BemTree
from bemtree.serialization import to_json

tree = BemTree(indent="  ", sort_children=False)
forest = tree.parse('<nav class="menu menu__item menu__item--active menu--dark"></nav>')

for root in forest:
    for node in root.walk():
        kind = "modifier" if node.is_modifier else "element" if node.is_element else "block"
        print(f"{kind:>8}: {node.name}")

print(to_json(forest, indent=2))
print(tree.render(forest))
