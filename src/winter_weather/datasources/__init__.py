"""Data source integrations.

Each subdirectory is one data source with a consistent structure:

    datasources/{name}/
    ├── __init__.py       # Public API re-exports
    ├── client.py         # API URLs, constants, store locations
    ├── models.py         # Dataclasses the analysis layer consumes
    └── {feature}.py      # Loaders (one per concept)

Adding a datasource
-------------------
1. Create ``datasources/{name}/`` with the files above.
   See ``archive/`` for the reference example.

2. Write loaders that read from the store and return dataclasses::

       def load_something(store: DataStore) -> Something:
           payload = store.read(SOMETHING_PATH)
           return parse_something(payload)

3. Re-export the public API in ``__init__.py`` with ``__all__``.

4. Wire into ``flows/build.py`` with a ``@task`` that calls the loader.

5. Add tests in ``tests/test_{name}.py``.
"""
