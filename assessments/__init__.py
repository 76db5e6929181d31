"""
assessments - Unit Fee Assessment Analyses

Computes and reports projected per-unit fee assessments for a fixed pool of
housing units.

Modules:
    - core: Exceptions, logging, settings and exact money arithmetic
    - domain: Pydantic/dataclass models and rounding policies
    - services: Distribution search and fee projection engines
    - ui: Console reports, table rendering and entry points
"""

__version__ = "0.3.0"
