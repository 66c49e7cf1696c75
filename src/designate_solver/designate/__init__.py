"""Designate client factory — build a record-set client from solver configuration."""

from __future__ import annotations

import openstack

from designate_solver.config import SolverConfig
from designate_solver.designate.base import DesignateClient
from designate_solver.designate.openstack_dns import OpenStackDesignateClient


def get_designate_client(config: SolverConfig) -> DesignateClient:
    """Connect to OpenStack and return a Designate record-set client.

    With ``OS_CLOUD`` unset, openstacksdk reads credentials from the ``OS_*``
    environment variables.

    Args:
        config: Solver configuration.

    Returns:
        A DesignateClient bound to a fresh OpenStack connection.
    """
    kwargs = {}
    if config.os_cloud:
        kwargs["cloud"] = config.os_cloud
    if config.os_region_name:
        kwargs["region_name"] = config.os_region_name
    return OpenStackDesignateClient(openstack.connect(**kwargs))
