"""Winter Weather - six winters of daily weather at one location, side by side.

Architecture::

    datasources/   Open-Meteo archive fixtures -> immutable WinterDataset
    store.py       JSON files in a metadata envelope (reference -> derived)
    analysis/      Day-index alignment, smoothing, monthly means (pure)
    i18n.py        Locale strategies (UI strings, day labels) for en / ru
    renderers/     Pure data -> HTML (SVG line charts, summary table, page)
    flows/         Prefect orchestration (build renders every dashboard state)

Data flow: store (fixtures) -> datasources -> analysis -> renderers -> derived/site/

Extension points - see each package's docstring for step-by-step guides:
  - New metric:        analysis/metrics.py
  - New language:      i18n.py
  - New UI module:     renderers/__init__.py
"""

__version__ = "0.1.0"
__author__ = "Michael Howden"

from winter_weather.config import Settings

__all__ = ["Settings", "__version__"]
