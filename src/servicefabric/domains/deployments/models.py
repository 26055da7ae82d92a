"""Pydantic models for compose deployments."""

from pydantic import Field

from servicefabric.models.common import Page, WireModel


class ComposeDeploymentStatus(WireModel):
    """Status of an application deployed from a Docker Compose file."""

    name: str = Field(..., description="Deployment name")
    application_name: str = Field("", description="Application created by the deployment")
    status: str = Field("", description="Provisioning, Creating, Ready, Deleting, Failed, ...")
    status_details: str = Field("", description="Detail message for the status")


class ComposeDeploymentStatusPage(Page[ComposeDeploymentStatus]):
    """Page of compose deployments."""
