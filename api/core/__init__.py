"""
Shared, cross-cutting code for the API.

`core/` should contain small building blocks that every resource uses
(DB wiring, settings, logging, error rendering, parameter parsing). Keep
resource-specific SQL and rules in the corresponding resource package
(e.g. `members/`).
"""
