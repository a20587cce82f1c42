"""
Prefect flows for the site pipeline.

Flows:
- build: Render the winter fixtures into a static HTML dashboard

Usage (local):
    python -m winter_weather.flows.build

Usage (Prefect):
    prefect server start  # Optional, for dashboard
    python -m winter_weather.flows.build
"""
