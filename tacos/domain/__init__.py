"""Describes the Taco Cloud domain. Centres around the `TacoOrder`.

Why is this easy?

- The ingredients are a fixed list of ten. No catalogue, no stock.
- A taco is a name and the ingredients picked for it.
- An order is the tacos designed in one session plus where to send them.
- Nothing is stored. The order lives as long as the session does.

The only thing worth being careful about is the edge between the form and
the domain. Ingredient codes arrive as strings and must resolve to an
`Ingredient` before they get anywhere near an order.
"""
