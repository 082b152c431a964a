"""Exceptions raised inside the dashboard node."""


class DashboardError(Exception):
    """Base error for dashboard node failures."""

    pass


class TemplateValidationError(DashboardError):
    """A template-mode input broke one of the allow-list rules."""

    pass


class DashboardGenerationError(DashboardError):
    """Dashboard records could not be assembled from the given inputs."""

    pass
