"""Domain layer for billtrack application."""

from importlib import import_module

# database.base imports domain.entities, so services are imported lazily
_SERVICES = {
    "BatchCoordinator": "billtrack.domain.bulk_load",
    "BulkLoadService": "billtrack.domain.bulk_load",
    "EntityResolver": "billtrack.domain.resolver",
    "PlatformService": "billtrack.domain.platform",
    "ClientService": "billtrack.domain.client",
    "ReportService": "billtrack.domain.report",
}

__all__ = list(_SERVICES)


def __getattr__(name):
    if name in _SERVICES:
        return getattr(import_module(_SERVICES[name]), name)
    raise AttributeError(f"module '{__name__}' has no attribute '{name}'")
