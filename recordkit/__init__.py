"""recordkit.

Typed data entries over SQLModel tables and a self-rendering HTML component
library.

High-level architecture
-----------------------

The codebase is organized around two catalogs:

- **Data entries** (``recordkit.core``): active-record style objects that hold
  one table row as a source mapping and expose typed ``get_*`` / ``set_*``
  accessors. Field mixins validate values before they are written and derive
  secondary columns such as SEO names. Async repositories load and save them.
- **HTML components** (``recordkit.web``): a class-per-tag hierarchy that keeps
  attribute state and serializes itself with ``render()``. Tables and selects
  render from in-memory sources or from database results.

Core subpackages
----------------

- ``recordkit.core.database``: SQLModel entities, ``DataEntry``, field mixins
  and repositories.
- ``recordkit.core.models``: the concrete entries (users, roles, plugins,
  security incidents) and their API schemas.
- ``recordkit.web``: page state, URL helpers and the HTML components.
- ``recordkit.server``: a FastAPI application that serves both.
"""

__version__ = "0.1.0"
