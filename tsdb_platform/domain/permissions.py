"""Permission sets granted at setup time.

Pure functions, no I/O. Order is part of the contract: operator grants first,
then org-admin grants, then bucket write, then bucket read. Within a set,
resource kinds follow ResourceType declaration order and actions follow
Action declaration order (read before write).
"""

from collections.abc import Callable

from tsdb_platform.domain.enums import Action, ResourceType
from tsdb_platform.domain.value_objects import Permission, Resource

PermissionFactory = Callable[[str, Action, ResourceType], Permission]


def operator_permissions() -> list[Permission]:
    """Every action on every resource kind, unscoped (instance operator)."""
    return [
        Permission(action=action, resource=Resource(type=resource_type))
        for resource_type in ResourceType
        for action in Action
    ]


def org_admin_permissions(org_id: str) -> list[Permission]:
    """Every action on every resource kind, scoped to one organization.

    The orgs grants target the organization itself by id.
    """
    return [
        Permission(action=action, resource=_org_scoped(resource_type, org_id))
        for resource_type in ResourceType
        for action in Action
    ]


def _org_scoped(resource_type: ResourceType, org_id: str) -> Resource:
    if resource_type is ResourceType.ORGS:
        return Resource(type=resource_type, id=org_id)
    return Resource(type=resource_type, org_id=org_id)


def new_permission_at_id(
    resource_id: str,
    action: Action | str,
    resource_type: ResourceType | str,
) -> Permission:
    """Build a permission scoped to a single resource id.

    Raises:
        InvalidException: Unknown action or resource type, or empty id.
    """
    return Permission(action=action, resource=Resource(type=resource_type, id=resource_id))


def onboarding_permissions(
    org_id: str,
    bucket_id: str,
    permission_at_id: PermissionFactory = new_permission_at_id,
) -> list[Permission]:
    """Permissions for the first operator token: operator ++ org admin ++ [write, read] on the bucket.

    permission_at_id builds the two bucket-scoped grants; any exception it
    raises propagates unchanged.
    """
    perms = operator_permissions()
    perms.extend(org_admin_permissions(org_id))
    write_bucket = permission_at_id(bucket_id, Action.WRITE, ResourceType.BUCKETS)
    read_bucket = permission_at_id(bucket_id, Action.READ, ResourceType.BUCKETS)
    perms.extend([write_bucket, read_bucket])
    return perms
