"""ECSM client.

Typed Python client for the ECSM edge orchestration REST API: services,
micro-services, deployment records, containers, nodes, config items and
provision templates.
"""

__version__ = "0.1.0"
