"""Ports: interfaces to external collaborators."""

from demofilter.domain.ports.access_code_issuer import AccessCodeIssuerPort
from demofilter.domain.ports.group_source import GroupSourcePort

__all__ = ["AccessCodeIssuerPort", "GroupSourcePort"]
