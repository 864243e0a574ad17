"""FastAPI adapter – health status endpoint."""
from mp_healthchecks.adapters.fastapi.routers import FastAPIHealthRouter

__all__ = ["FastAPIHealthRouter"]
